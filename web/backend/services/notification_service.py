#!/usr/bin/env python3
"""
Notification service - read side of in-app notifications.
"""

from typing import List

from database.repository import MatchingRepository
from ..models.responses import NotificationItem
from ..utils import safe_datetime_iso
from ..exceptions import NotificationNotFoundException


class NotificationReadService:
    def __init__(self, repo: MatchingRepository):
        self.repo = repo

    def list(self, user_id: str, unread_only: bool = False) -> List[NotificationItem]:
        return [
            NotificationItem(
                notification_id=str(n.id),
                type=n.type,
                title=n.title,
                message=n.message,
                link=n.link,
                metadata=dict(n.details or {}),
                is_read=bool(n.is_read),
                created_at=safe_datetime_iso(n.created_at),
            )
            for n in self.repo.list_notifications(user_id, unread_only)
        ]

    def mark_read(self, notification_id: str) -> None:
        if self.repo.mark_notification_read(notification_id) is None:
            raise NotificationNotFoundException(f"Notification {notification_id} not found")
