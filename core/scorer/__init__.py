#!/usr/bin/env python3
"""
Scoring Module - compatibility scoring with no I/O.

Public API:
- calculate_compatibility: project-to-candidate score (team recommendations)
- analyze_basic_compatibility / fallback_compatibility: rule-based teammate scores
- TeammateScorer: picks basic vs. LLM-enriched scoring for a pair

Modules:

- models.py: Data structures (MatchResult, ProjectCompatibility)
- project_fit.py: Skill coverage + breadth/experience bonuses
- teammate.py: Interest/skill overlap scoring and the AI-unavailable fallback
- enriched.py: Prompt building, response parsing, TeammateScorer
"""

from core.scorer.models import MatchResult, ProjectCompatibility
from core.scorer.project_fit import calculate_compatibility
from core.scorer.teammate import analyze_basic_compatibility, fallback_compatibility
from core.scorer.enriched import TeammateScorer

__all__ = [
    'MatchResult',
    'ProjectCompatibility',
    'calculate_compatibility',
    'analyze_basic_compatibility',
    'fallback_compatibility',
    'TeammateScorer',
]
