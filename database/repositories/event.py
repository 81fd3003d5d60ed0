import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from database.models import Event, EventInterest
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class EventRepository(BaseRepository):
    def get_event(self, event_id: str) -> Optional[Event]:
        stmt = select(Event).where(Event.id == event_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_event_interested_users(self, event_id: str) -> List[str]:
        """User ids interested in an event, in the order they signed up."""
        stmt = (
            select(EventInterest.user_id)
            .where(EventInterest.event_id == event_id)
            .order_by(EventInterest.created_at, EventInterest.id)
        )
        return [str(user_id) for user_id in self.db.execute(stmt).scalars().all()]

    def add_event_interest(self, event_id: str, user_id: str) -> Tuple[EventInterest, bool]:
        """
        Record that a user is interested in an event.

        Returns (interest, created). Repeating the call is harmless and
        returns the existing row with created=False.
        """
        existing = self.db.execute(
            select(EventInterest).where(
                EventInterest.event_id == event_id,
                EventInterest.user_id == user_id
            )
        ).scalar_one_or_none()
        if existing is not None:
            return existing, False

        interest = EventInterest(event_id=event_id, user_id=user_id)
        self.db.add(interest)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent request for the same pair
            self.db.rollback()
            existing = self.db.execute(
                select(EventInterest).where(
                    EventInterest.event_id == event_id,
                    EventInterest.user_id == user_id
                )
            ).scalar_one()
            return existing, False
        return interest, True
