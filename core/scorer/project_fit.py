#!/usr/bin/env python3
"""
Project Fit - project-to-candidate compatibility for team recommendations.

Score = matched required skills / required skills, plus:
- breadth bonus (+0.10) when the candidate lists more skills than required
- experience bonus (+0.15) when one of the candidate's self-reported
  projects shares a keyword with the target project's description

Capped at 1.00 and rounded to two decimals.
"""

import math
import logging
from typing import List

from core.matcher.dto import Profile, ProjectInfo, parse_self_reported_projects
from core.scorer.models import ProjectCompatibility

logger = logging.getLogger(__name__)

BREADTH_BONUS = 0.10
EXPERIENCE_BONUS = 0.15
MIN_KEYWORD_LENGTH = 5
HIGHLY_RECOMMENDED_ABOVE = 0.7
GOOD_FIT_ABOVE = 0.4
MAX_LISTED_SKILLS = 3


def round_score(value: float) -> float:
    """Round half-up to two decimals (0.125 -> 0.13)."""
    return math.floor(value * 100 + 0.5) / 100


def find_matching_skills(required_skills: List[str], candidate_skills: List[str]) -> List[str]:
    """Required skills (lower-cased) covered by a candidate skill.

    A skill covers a requirement when either string contains the other,
    so "react" covers "react native" and "reactjs".
    """
    required = [s.lower() for s in required_skills]
    candidate = [s.lower() for s in candidate_skills]
    return [
        req for req in required
        if any(skill in req or req in skill for skill in candidate)
    ]


def has_relevant_experience(project: ProjectInfo, profile: Profile) -> bool:
    """True when a self-reported project description shares a keyword with the target."""
    own_projects = parse_self_reported_projects(profile.projects)
    if not own_projects:
        return False

    keywords = [
        kw for kw in (project.description or "").lower().split(' ')
        if len(kw) >= MIN_KEYWORD_LENGTH
    ]
    if not keywords:
        return False

    for own in own_projects:
        desc = own.description.lower()
        if any(kw in desc for kw in keywords):
            return True
    return False


def build_reason(score: float, matching_skills: List[str], required_count: int, candidate_skill_count: int) -> str:
    if matching_skills:
        listed = ', '.join(matching_skills[:MAX_LISTED_SKILLS])
        reason = f"Strong match! Has {len(matching_skills)} of {required_count} required skills: {listed}"
    elif candidate_skill_count > 0:
        reason = f"Has {candidate_skill_count} relevant skills that could complement the team"
    else:
        reason = "Enthusiastic member who can learn and contribute"

    if score > HIGHLY_RECOMMENDED_ABOVE:
        reason = f"⭐ {reason}. Highly recommended!"
    elif score > GOOD_FIT_ABOVE:
        reason = f"✨ {reason}. Good fit!"
    return reason


def calculate_compatibility(project: ProjectInfo, profile: Profile) -> ProjectCompatibility:
    """Score how well a candidate fits a project's required skills.

    Args:
        project: Target project (required skills + description)
        profile: Candidate profile

    Returns:
        ProjectCompatibility with score in [0, 1], matching skills and reason
    """
    required = project.required_skills or []
    candidate_skills = profile.skills or []

    matching_skills = find_matching_skills(required, candidate_skills)

    score = len(matching_skills) / max(len(required), 1)

    if len(candidate_skills) > len(required):
        score += BREADTH_BONUS

    if has_relevant_experience(project, profile):
        score += EXPERIENCE_BONUS

    score = min(score, 1.0)

    # Tier comes from the unrounded score; only the stored value is rounded
    reason = build_reason(score, matching_skills, len(required), len(candidate_skills))

    score = round_score(score)

    logger.debug(f"Project {project.id} / user {profile.id}: score={score:.2f}, skills={matching_skills}")

    return ProjectCompatibility(score=score, matching_skills=matching_skills, reason=reason)
