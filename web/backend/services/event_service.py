#!/usr/bin/env python3
"""
Event service - record interest and trigger background teammate matching.
"""

import logging
from typing import Optional, Tuple

from database.repository import MatchingRepository
from pipeline.tasks import MatchingTaskDispatcher
from ..exceptions import EventNotFoundException, UserNotFoundException

logger = logging.getLogger(__name__)


class EventInterestService:
    def __init__(self, repo: MatchingRepository, dispatcher: MatchingTaskDispatcher):
        self.repo = repo
        self.dispatcher = dispatcher

    def mark_interest(self, event_id: str, user_id: str) -> Tuple[bool, Optional[str]]:
        """
        Record interest and dispatch matching for the event.

        Matching is dispatched only when the interest is new; a repeated
        call changes nothing.

        Returns:
            (already_interested, matching job id or None)
        """
        if self.repo.get_event(event_id) is None:
            raise EventNotFoundException(f"Event {event_id} not found")
        if self.repo.get_profile(user_id) is None:
            raise UserNotFoundException(f"User {user_id} not found")

        _, created = self.repo.add_event_interest(event_id, user_id)
        if not created:
            return True, None

        logger.info(f"User {user_id} interested in event {event_id}; dispatching matching")
        job_id = self.dispatcher.dispatch_event_matching(event_id)
        return False, job_id
