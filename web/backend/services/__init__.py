"""Business logic services."""

from .recommendation_service import RecommendationService
from .event_service import EventInterestService
from .match_service import MatchService
from .notification_service import NotificationReadService
