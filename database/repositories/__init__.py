from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository
from database.repositories.project import ProjectRepository
from database.repositories.event import EventRepository
from database.repositories.match import MatchRepository
from database.repositories.notification import NotificationRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
    'ProjectRepository',
    'EventRepository',
    'MatchRepository',
    'NotificationRepository',
]
