#!/usr/bin/env python3
"""
Enriched Teammate Scoring - language-model analysis with deterministic fallback.

Users with enough activity (posts + projects) are compared by the
external LLM provider using their profiles, recent posts and projects.
The provider is best-effort: any failure (missing provider, network,
timeout, malformed JSON, missing keys) resolves to the fallback score
for that pair only. Users with too little activity take the basic path.
"""

import json
import math
import logging
from typing import Any, Dict, List, Optional

from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import TEAMMATE_MATCHING_PROMPT, TEAMMATE_MATCHING_SYSTEM_PROMPT
from core.matcher.dto import EnhancedUserData, describe_experience
from core.scorer.models import MatchResult, SOURCE_AI
from core.scorer.teammate import analyze_basic_compatibility, fallback_compatibility, clamp


DEFAULT_MIN_ACTIVITY = 3
DEFAULT_RECENT_LIMIT = 10


def _join_or(items: List[str], placeholder: str, separator: str = ', ') -> str:
    cleaned = [i for i in items if i]
    return separator.join(cleaned) if cleaned else placeholder


def _user_fields(data: EnhancedUserData, prefix: str, recent_limit: int) -> Dict[str, str]:
    profile = data.profile
    posts = [p.content for p in data.posts[:recent_limit]]
    projects = [f"{p.title}: {p.description}" for p in data.projects[:recent_limit]]
    return {
        f'{prefix}_name': profile.display_name or profile.id,
        f'{prefix}_skills': _join_or(profile.skills, 'None listed'),
        f'{prefix}_interests': _join_or(profile.interests, 'None listed'),
        f'{prefix}_bio': profile.bio or 'Not provided',
        f'{prefix}_experience': describe_experience(profile.experience) or 'Not provided',
        f'{prefix}_college': profile.college or 'Not provided',
        f'{prefix}_posts': _join_or(posts, 'No posts yet', ' | '),
        f'{prefix}_projects': _join_or(projects, 'No projects yet', ' | '),
    }


def build_teammate_prompt(
    user_data1: EnhancedUserData,
    user_data2: EnhancedUserData,
    event_type: Optional[str] = None,
    recent_limit: int = DEFAULT_RECENT_LIMIT
) -> str:
    """Render the comparison prompt for two users."""
    fields = {}
    fields.update(_user_fields(user_data1, 'user1', recent_limit))
    fields.update(_user_fields(user_data2, 'user2', recent_limit))
    fields['event_clause'] = f" for a {event_type} event" if event_type else ""
    fields['event_criterion'] = f" Do they match the {event_type} event type?" if event_type else ""
    return TEAMMATE_MATCHING_PROMPT.format(**fields)


def strip_code_fences(text: str) -> str:
    """Remove markdown fences and anything outside the outermost JSON braces."""
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    text = text.strip()

    start = text.find('{')
    if start != -1:
        end = text.rfind('}')
        if end > start:
            text = text[start:end + 1]
    return text


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def parse_model_response(text: str) -> Dict[str, Any]:
    """Parse the provider's JSON answer.

    Raises:
        ValueError: unparseable JSON, non-object payload or non-numeric score
        KeyError: match_score missing
    """
    data = json.loads(strip_code_fences(text))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    score = float(data['match_score'])
    if math.isnan(score):
        raise ValueError("match_score is NaN")

    return {
        'match_score': clamp(score),
        'matching_skills': _str_list(data.get('matching_skills')),
        'matching_interests': _str_list(data.get('matching_interests')),
        'reasoning': str(data.get('reasoning') or 'No reasoning provided'),
    }


class TeammateScorer:
    """
    Chooses the scoring path for a pair of users.

    - Either user below ``min_activity`` posts+projects: basic path
    - Otherwise: LLM provider, falling back to the deterministic score
    """

    def __init__(
        self,
        llm: Optional[LLMProvider] = None,
        min_activity: int = DEFAULT_MIN_ACTIVITY,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        logger: Optional[logging.Logger] = None
    ):
        self.llm = llm
        self.min_activity = min_activity
        self.recent_limit = recent_limit
        self.logger = logger or logging.getLogger(__name__)

    def score(
        self,
        user_data1: EnhancedUserData,
        user_data2: EnhancedUserData,
        event_type: Optional[str] = None
    ) -> MatchResult:
        """Score a pair; never raises for provider problems."""
        has_minimal_data = (
            user_data1.activity_count < self.min_activity
            or user_data2.activity_count < self.min_activity
        )

        if has_minimal_data:
            self.logger.debug(
                f"Minimal data for {user_data1.profile.id} / {user_data2.profile.id} "
                f"({user_data1.activity_count}, {user_data2.activity_count}); using basic matching"
            )
            return analyze_basic_compatibility(user_data1.profile, user_data2.profile, event_type)

        return self.score_enriched(user_data1, user_data2, event_type)

    def score_enriched(
        self,
        user_data1: EnhancedUserData,
        user_data2: EnhancedUserData,
        event_type: Optional[str] = None
    ) -> MatchResult:
        user1 = user_data1.profile
        user2 = user_data2.profile

        try:
            if self.llm is None:
                raise RuntimeError("No LLM provider configured")

            prompt = build_teammate_prompt(user_data1, user_data2, event_type, self.recent_limit)
            raw = self.llm.generate_json(prompt, system_prompt=TEAMMATE_MATCHING_SYSTEM_PROMPT)
            analysis = parse_model_response(raw)
        except Exception as e:
            self.logger.warning(f"AI compatibility analysis failed for {user1.id} / {user2.id}: {e}")
            return fallback_compatibility(user1, user2)

        self.logger.info(f"AI match score {user1.id} <-> {user2.id}: {analysis['match_score']:.2f}")

        return MatchResult(
            user1_id=user1.id,
            user2_id=user2.id,
            score=analysis['match_score'],
            matching_skills=analysis['matching_skills'],
            matching_interests=analysis['matching_interests'],
            reasoning=analysis['reasoning'],
            source=SOURCE_AI,
        )
