"""
Notification Module

In-app notifications for teammate matches and team recommendations.

Usage:
    from notification import NotificationService

    service = NotificationService(repo)
    service.notify_teammate_match(match)
"""

from notification.service import NotificationService
from notification.message_builder import NotificationMessageBuilder, NotificationContent

__all__ = ['NotificationService', 'NotificationMessageBuilder', 'NotificationContent']
