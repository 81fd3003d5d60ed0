#!/usr/bin/env python3
"""
Notification Service - in-app notifications for matches and recommendations.

Notifications are written straight to the notifications table. Delivery
is best-effort: names and titles are looked up with fallbacks, and a
failed insert is logged without touching the match or recommendation
that triggered it (those are already committed).

Usage:
    from notification.service import NotificationService

    notifier = NotificationService(repo)
    notifier.notify_teammate_match(match)
"""

import logging
from typing import List, Optional

from database.repository import MatchingRepository
from database.models import Notification, Project, TeamRecommendation, TeammateMatch
from notification.message_builder import NotificationMessageBuilder, NotificationContent


class NotificationService:
    def __init__(self, repo: MatchingRepository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    def _display_name(self, user_id: str) -> Optional[str]:
        try:
            profile = self.repo.get_profile(user_id)
        except Exception as e:
            self.logger.warning(f"Could not load profile {user_id} for notification: {e}")
            return None
        if profile is None:
            return None
        return profile.full_name or profile.username

    def _event_title(self, event_id: str) -> Optional[str]:
        try:
            event = self.repo.get_event(event_id)
        except Exception as e:
            self.logger.warning(f"Could not load event {event_id} for notification: {e}")
            return None
        return event.title if event is not None else None

    def _store(self, contents: List[NotificationContent]) -> List[Notification]:
        try:
            return self.repo.insert_notifications([c.to_record() for c in contents])
        except Exception as e:
            self.logger.error(
                f"Failed to store {len(contents)} notification(s) "
                f"for {', '.join(c.user_id for c in contents)}: {e}"
            )
            return []

    def notify_teammate_match(self, match: TeammateMatch) -> List[Notification]:
        """Notify both users of a new teammate match."""
        event_title = self._event_title(match.event_id)
        user1_name = self._display_name(match.user1_id)
        user2_name = self._display_name(match.user2_id)
        score = float(match.compatibility_score)

        contents = [
            NotificationMessageBuilder.teammate_match(
                recipient_id=match.user1_id,
                other_name=user2_name,
                event_id=match.event_id,
                event_title=event_title,
                match_id=match.id,
                score=score,
                reasoning=match.ai_reasoning,
            ),
            NotificationMessageBuilder.teammate_match(
                recipient_id=match.user2_id,
                other_name=user1_name,
                event_id=match.event_id,
                event_title=event_title,
                match_id=match.id,
                score=score,
                reasoning=match.ai_reasoning,
            ),
        ]
        stored = self._store(contents)
        if stored:
            self.logger.info(f"Sent match notifications to {match.user1_id} and {match.user2_id}")
        return stored

    def notify_team_recommendation(
        self,
        recommendation: TeamRecommendation,
        project: Optional[Project] = None
    ) -> List[Notification]:
        """Notify the recommended user (never the project owner)."""
        recipient = recommendation.recommended_user_id
        if project is not None and recipient == project.owner_id:
            return []

        content = NotificationMessageBuilder.team_recommendation(
            recipient_id=recipient,
            project_id=recommendation.project_id,
            project_title=project.title if project is not None else None,
            recommendation_id=recommendation.id,
            score=float(recommendation.compatibility_score),
            reasoning=recommendation.reason,
        )
        return self._store([content])
