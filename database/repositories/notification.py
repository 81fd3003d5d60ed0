import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select

from database.models import Notification
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class NotificationRepository(BaseRepository):
    def insert_notifications(self, records: Sequence[Dict[str, Any]]) -> List[Notification]:
        """Insert and commit a batch of notifications (all or nothing)."""
        rows = [
            Notification(
                user_id=record['user_id'],
                type=record['type'],
                title=record['title'],
                message=record['message'],
                link=record.get('link'),
                details=dict(record.get('metadata') or {}),
            )
            for record in records
        ]
        if not rows:
            return []
        try:
            self.db.add_all(rows)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return rows

    def list_notifications(self, user_id: str, unread_only: bool = False, limit: int = 50) -> List[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.is_read == False)  # noqa: E712
        stmt = stmt.order_by(Notification.created_at.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def mark_notification_read(self, notification_id: str) -> Optional[Notification]:
        """Returns None when the notification does not exist."""
        notification = self.db.execute(
            select(Notification).where(Notification.id == notification_id)
        ).scalar_one_or_none()
        if notification is None:
            return None
        if not notification.is_read:
            notification.is_read = True
            self.db.commit()
        return notification
