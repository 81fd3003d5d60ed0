import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError

from core.exceptions import DuplicateMatchError, MatchNotFoundError, InvalidMatchTransitionError
from database.models import (
    TeammateMatch, make_pair_key,
    MATCH_STATUS_PENDING, MATCH_STATUS_ACCEPTED, MATCH_STATUS_REJECTED,
)
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_match(self, match_id: str) -> Optional[TeammateMatch]:
        stmt = select(TeammateMatch).where(TeammateMatch.id == match_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_existing_match(self, event_id: str, user_a: str, user_b: str) -> Optional[TeammateMatch]:
        """
        Find a match for the unordered pair (user_a, user_b) on an event.

        Both orderings are checked explicitly so rows written without a
        pair_key by older code are still found.
        """
        stmt = select(TeammateMatch).where(
            TeammateMatch.event_id == event_id,
            or_(
                TeammateMatch.pair_key == make_pair_key(user_a, user_b),
                (TeammateMatch.user1_id == user_a) & (TeammateMatch.user2_id == user_b),
                (TeammateMatch.user1_id == user_b) & (TeammateMatch.user2_id == user_a),
            )
        ).limit(1)
        return self.db.execute(stmt).scalars().first()

    def insert_match(self, record: Dict[str, Any]) -> TeammateMatch:
        """
        Insert and commit a pending teammate match.

        Raises:
            DuplicateMatchError: the (event, unordered pair) already has a match.
        """
        event_id = record['event_id']
        user1_id = record['user1_id']
        user2_id = record['user2_id']

        match = TeammateMatch(
            event_id=event_id,
            user1_id=user1_id,
            user2_id=user2_id,
            pair_key=make_pair_key(user1_id, user2_id),
            compatibility_score=record['compatibility_score'],
            matching_skills=list(record.get('matching_skills') or []),
            matching_interests=list(record.get('matching_interests') or []),
            ai_reasoning=record.get('ai_reasoning'),
            score_source=record.get('score_source', 'basic'),
            status=MATCH_STATUS_PENDING,
        )
        self.db.add(match)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateMatchError(event_id, user1_id, user2_id) from e
        except Exception:
            self.db.rollback()
            raise
        return match

    def list_matches_for_user(self, user_id: str, status: Optional[str] = None) -> List[TeammateMatch]:
        """Matches where the user is on either side, newest first."""
        stmt = select(TeammateMatch).where(
            or_(TeammateMatch.user1_id == user_id, TeammateMatch.user2_id == user_id)
        )
        if status is not None:
            stmt = stmt.where(TeammateMatch.status == status)
        stmt = stmt.order_by(TeammateMatch.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def update_match_status(self, match_id: str, user_id: str, status: str) -> TeammateMatch:
        """
        Accept or reject a pending match on behalf of one of its users.

        Raises:
            MatchNotFoundError: unknown match id.
            InvalidMatchTransitionError: the match is no longer pending,
                the target status is not terminal, or the user is not
                part of the match.
        """
        if status not in (MATCH_STATUS_ACCEPTED, MATCH_STATUS_REJECTED):
            raise InvalidMatchTransitionError(f"Cannot move a match to status '{status}'")

        match = self.get_match(match_id)
        if match is None:
            raise MatchNotFoundError(f"Match {match_id} not found")
        if user_id not in (match.user1_id, match.user2_id):
            raise InvalidMatchTransitionError(f"User {user_id} is not part of match {match_id}")
        if match.status != MATCH_STATUS_PENDING:
            raise InvalidMatchTransitionError(
                f"Match {match_id} is already {match.status}"
            )

        match.status = status
        match.responded_by = user_id
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"Match {match_id} {status} by {user_id}")
        return match
