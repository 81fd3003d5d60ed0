#!/usr/bin/env python3
"""
Scoring Models - Data structures for compatibility results.
"""

from typing import List
from dataclasses import dataclass, field

# Where a teammate score came from
SOURCE_BASIC = "basic"
SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class MatchResult:
    """Candidate-to-candidate compatibility for one unordered pair."""
    user1_id: str
    user2_id: str
    score: float = 0.0
    matching_skills: List[str] = field(default_factory=list)
    matching_interests: List[str] = field(default_factory=list)
    reasoning: str = ""
    source: str = SOURCE_BASIC


@dataclass(frozen=True)
class ProjectCompatibility:
    """Project-to-candidate compatibility used for team recommendations."""
    score: float = 0.0
    matching_skills: List[str] = field(default_factory=list)
    reason: str = ""
