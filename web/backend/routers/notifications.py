#!/usr/bin/env python3
"""
Notification endpoints - list and mark notifications.
"""

from fastapi import APIRouter, Depends, Query

from database.repository import MatchingRepository
from ..dependencies import get_repository
from ..services.notification_service import NotificationReadService
from ..models.responses import NotificationsResponse, MarkReadResponse

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def get_notification_service(repo: MatchingRepository = Depends(get_repository)) -> NotificationReadService:
    """Dependency to get notification service."""
    return NotificationReadService(repo)


@router.get("", response_model=NotificationsResponse)
def list_notifications(
    user_id: str = Query(..., min_length=1),
    unread_only: bool = Query(default=False),
    service: NotificationReadService = Depends(get_notification_service)
):
    """Notifications for a user, newest first."""
    notifications = service.list(user_id, unread_only)
    return NotificationsResponse(
        success=True,
        count=len(notifications),
        notifications=notifications
    )


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
def mark_notification_read(
    notification_id: str,
    service: NotificationReadService = Depends(get_notification_service)
):
    service.mark_read(notification_id)
    return MarkReadResponse(success=True, notification_id=notification_id, is_read=True)
