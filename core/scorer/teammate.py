#!/usr/bin/env python3
"""
Teammate Scoring - deterministic candidate-to-candidate compatibility.

Two rule-based computations live here:

- analyze_basic_compatibility: used when either user has too little
  activity (posts + projects) for the enriched path. Weighted overlap of
  interests (40%) and skills (30%), plus event-type and college bonuses,
  floored at 0.3 whenever anything overlaps.
- fallback_compatibility: used when the enriched path fails. Plain
  overlap of skills + interests over the larger combined list.
"""

import logging
from typing import List, Optional

from core.matcher.dto import Profile
from core.scorer.models import MatchResult, SOURCE_BASIC, SOURCE_FALLBACK

logger = logging.getLogger(__name__)

INTEREST_WEIGHT = 0.4
SKILL_WEIGHT = 0.3
EVENT_TYPE_BONUS = 0.2
COLLEGE_BONUS = 0.1
OVERLAP_FLOOR = 0.3

GOOD_MATCH_AT = 0.5
PROMISING_AT = 0.3
MAX_LISTED_ITEMS = 3

AI_UNAVAILABLE_REASONING = "Basic compatibility analysis (AI service unavailable)"
GENERIC_CLOSING = "Both interested in the same event and open to collaboration."


def _terms_match(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a == b or a in b or b in a


def overlap(first: List[str], second: List[str], fuzzy: bool = False) -> List[str]:
    """Items of ``first`` also present in ``second``, first-seen order, no repeats.

    Exact comparison by default; with ``fuzzy`` a case-insensitive
    equality or substring match in either direction counts.
    """
    result = []
    for item in first or []:
        if item in result:
            continue
        if fuzzy:
            found = any(_terms_match(item, other) for other in second or [])
        else:
            found = item in (second or [])
        if found:
            result.append(item)
    return result


def has_event_interest(interests: List[str], event_type: str) -> bool:
    return any(_terms_match(interest, event_type) for interest in interests or [])


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(value, high))


def build_basic_reasoning(
    score: float,
    matching_interests: List[str],
    matching_skills: List[str],
    event_type: Optional[str],
    event_type_aligned: bool
) -> str:
    if score >= GOOD_MATCH_AT:
        parts = ["Good potential match!"]
    elif score >= PROMISING_AT:
        parts = ["Promising collaboration opportunity!"]
    else:
        parts = ["Potential for collaboration."]

    details = []
    if matching_interests:
        details.append(f"Shared interests in {', '.join(matching_interests[:MAX_LISTED_ITEMS])}.")
    if matching_skills:
        details.append(f"Common skills: {', '.join(matching_skills[:MAX_LISTED_ITEMS])}.")
    if event_type_aligned:
        details.append(f"Both aligned with {event_type} event type.")
    if not details:
        details.append(GENERIC_CLOSING)

    return " ".join(parts + details)


def analyze_basic_compatibility(
    user1: Profile,
    user2: Profile,
    event_type: Optional[str] = None
) -> MatchResult:
    """Rule-based compatibility for users with minimal activity data.

    Args:
        user1: First profile
        user2: Second profile
        event_type: Optional event type tag; enables fuzzy overlap and the event bonus

    Returns:
        MatchResult with score clamped to [0, 1]
    """
    fuzzy = bool(event_type)
    interests1 = user1.interests or []
    interests2 = user2.interests or []
    skills1 = user1.skills or []
    skills2 = user2.skills or []

    matching_interests = overlap(interests1, interests2, fuzzy=fuzzy)
    matching_skills = overlap(skills1, skills2, fuzzy=fuzzy)

    event_type_bonus = 0.0
    if event_type and has_event_interest(interests1, event_type) and has_event_interest(interests2, event_type):
        event_type_bonus = EVENT_TYPE_BONUS

    college_bonus = 0.0
    if user1.college and user2.college and user1.college == user2.college:
        college_bonus = COLLEGE_BONUS

    interest_score = len(matching_interests) / max(len(interests1), len(interests2), 1)
    skill_score = len(matching_skills) / max(len(skills1), len(skills2), 1)

    score = (
        INTEREST_WEIGHT * interest_score
        + SKILL_WEIGHT * skill_score
        + event_type_bonus
        + college_bonus
    )

    if matching_interests or matching_skills:
        score = max(score, OVERLAP_FLOOR)

    score = clamp(score)

    reasoning = build_basic_reasoning(
        score, matching_interests, matching_skills, event_type, event_type_bonus > 0
    )

    logger.debug(
        f"Basic match {user1.id} <-> {user2.id}: score={score:.2f} "
        f"interests={matching_interests} skills={matching_skills} "
        f"event_bonus={event_type_bonus} college_bonus={college_bonus}"
    )

    return MatchResult(
        user1_id=user1.id,
        user2_id=user2.id,
        score=score,
        matching_skills=matching_skills,
        matching_interests=matching_interests,
        reasoning=reasoning,
        source=SOURCE_BASIC,
    )


def fallback_compatibility(user1: Profile, user2: Profile) -> MatchResult:
    """Deterministic score used when the language-model scorer is unavailable."""
    matching_skills = overlap(user1.skills, user2.skills)
    matching_interests = overlap(user1.interests, user2.interests)

    total_items = max(
        len(user1.skills or []) + len(user1.interests or []),
        len(user2.skills or []) + len(user2.interests or []),
        1
    )
    score = clamp((len(matching_skills) + len(matching_interests)) / total_items)

    return MatchResult(
        user1_id=user1.id,
        user2_id=user2.id,
        score=score,
        matching_skills=matching_skills,
        matching_interests=matching_interests,
        reasoning=AI_UNAVAILABLE_REASONING,
        source=SOURCE_FALLBACK,
    )
