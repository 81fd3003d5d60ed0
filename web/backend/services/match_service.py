#!/usr/bin/env python3
"""
Match service - list and respond to teammate matches.
"""

import logging
from typing import List, Optional

from core.exceptions import MatchNotFoundError, InvalidMatchTransitionError
from database.models import MATCH_STATUS_ACCEPTED, MATCH_STATUS_REJECTED
from database.repository import MatchingRepository
from ..models.responses import TeammateMatchSummary
from ..utils import safe_float, safe_str_list, safe_datetime_iso, profile_summary
from ..exceptions import MatchNotFoundException, InvalidMatchActionException

logger = logging.getLogger(__name__)


class MatchService:
    """Service for a user's teammate matches."""

    def __init__(self, repo: MatchingRepository):
        self.repo = repo

    def get_matches(self, user_id: str, status: Optional[str] = None) -> List[TeammateMatchSummary]:
        """
        Matches involving the user, newest first, each with the other user's profile.

        Args:
            user_id: The viewing user.
            status: pending, accepted, rejected or None for all.
        """
        matches = self.repo.list_matches_for_user(user_id, status)

        teammate_ids = [m.user2_id if m.user1_id == user_id else m.user1_id for m in matches]
        profiles = {p.id: p for p in self.repo.get_profiles(set(teammate_ids))}
        event_titles = {}

        summaries = []
        for match, teammate_id in zip(matches, teammate_ids):
            if match.event_id not in event_titles:
                event = self.repo.get_event(match.event_id)
                event_titles[match.event_id] = event.title if event is not None else None

            summaries.append(TeammateMatchSummary(
                match_id=str(match.id),
                event_id=str(match.event_id),
                event_title=event_titles[match.event_id],
                status=match.status,
                compatibility_score=safe_float(match.compatibility_score),
                matching_skills=safe_str_list(match.matching_skills),
                matching_interests=safe_str_list(match.matching_interests),
                ai_reasoning=match.ai_reasoning,
                created_at=safe_datetime_iso(match.created_at),
                teammate=profile_summary(profiles.get(teammate_id)),
            ))
        return summaries

    def respond(self, match_id: str, user_id: str, accept: bool) -> str:
        """Accept or reject a pending match; returns the new status."""
        status = MATCH_STATUS_ACCEPTED if accept else MATCH_STATUS_REJECTED
        try:
            match = self.repo.update_match_status(match_id, user_id, status)
        except MatchNotFoundError as e:
            raise MatchNotFoundException(str(e)) from e
        except InvalidMatchTransitionError as e:
            raise InvalidMatchActionException(str(e)) from e
        return match.status
