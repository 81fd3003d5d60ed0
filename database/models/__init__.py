from .base import Base
from .profile import Profile, Post
from .project import Project, ProjectMember, TeamRecommendation
from .event import Event, EventInterest
from .match import (
    TeammateMatch, make_pair_key,
    MATCH_STATUS_PENDING, MATCH_STATUS_ACCEPTED, MATCH_STATUS_REJECTED, MATCH_STATUSES,
)
from .notification import Notification, NOTIFICATION_TEAMMATE_MATCH, NOTIFICATION_TEAM_RECOMMENDATION

__all__ = [
    'Base',
    'Profile',
    'Post',
    'Project',
    'ProjectMember',
    'TeamRecommendation',
    'Event',
    'EventInterest',
    'TeammateMatch',
    'make_pair_key',
    'MATCH_STATUS_PENDING',
    'MATCH_STATUS_ACCEPTED',
    'MATCH_STATUS_REJECTED',
    'MATCH_STATUSES',
    'Notification',
    'NOTIFICATION_TEAMMATE_MATCH',
    'NOTIFICATION_TEAM_RECOMMENDATION',
]
