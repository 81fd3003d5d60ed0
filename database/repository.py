import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from database.models import (
    Profile, Post, Project, Event, EventInterest,
    TeamRecommendation, TeammateMatch, Notification,
)
from database.repositories import (
    ProfileRepository,
    ProjectRepository,
    EventRepository,
    MatchRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


class MatchingRepository:
    """
    Record-store facade used by the matching services.

    Reads go through the per-table repositories sharing one Session.
    Writes that must survive independently of each other (match inserts,
    recommendation replacement, notification inserts) commit themselves.
    """

    def __init__(self, db: Session):
        self.db = db
        self.profiles = ProfileRepository(db)
        self.projects = ProjectRepository(db)
        self.events = EventRepository(db)
        self.matches = MatchRepository(db)
        self.notifications = NotificationRepository(db)

    # --- Profiles ---

    def get_profile(self, user_id: str) -> Optional[Profile]:
        return self.profiles.get_profile(user_id)

    def get_profiles(self, user_ids: Iterable[str]) -> List[Profile]:
        return self.profiles.get_profiles(user_ids)

    def list_recent_posts(self, user_id: str, limit: int = 10) -> List[Post]:
        return self.profiles.list_recent_posts(user_id, limit)

    def list_recent_projects(self, user_id: str, limit: int = 10) -> List[Project]:
        return self.profiles.list_recent_projects(user_id, limit)

    def list_candidates(self, exclude_ids: Iterable[str]) -> List[Profile]:
        return self.profiles.list_candidates(exclude_ids)

    # --- Projects & recommendations ---

    def get_project(self, project_id: str) -> Optional[Project]:
        return self.projects.get_project(project_id)

    def list_project_members(self, project_id: str) -> List[str]:
        return self.projects.list_project_members(project_id)

    def replace_recommendations(self, project_id: str, records: Sequence[Dict[str, Any]]) -> List[TeamRecommendation]:
        return self.projects.replace_recommendations(project_id, records)

    def get_team_recommendations(self, project_id: str) -> List[TeamRecommendation]:
        return self.projects.get_team_recommendations(project_id)

    # --- Events ---

    def get_event(self, event_id: str) -> Optional[Event]:
        return self.events.get_event(event_id)

    def list_event_interested_users(self, event_id: str) -> List[str]:
        return self.events.list_event_interested_users(event_id)

    def add_event_interest(self, event_id: str, user_id: str) -> Tuple[EventInterest, bool]:
        return self.events.add_event_interest(event_id, user_id)

    # --- Teammate matches ---

    def get_match(self, match_id: str) -> Optional[TeammateMatch]:
        return self.matches.get_match(match_id)

    def find_existing_match(self, event_id: str, user_a: str, user_b: str) -> Optional[TeammateMatch]:
        return self.matches.find_existing_match(event_id, user_a, user_b)

    def insert_match(self, record: Dict[str, Any]) -> TeammateMatch:
        return self.matches.insert_match(record)

    def list_matches_for_user(self, user_id: str, status: Optional[str] = None) -> List[TeammateMatch]:
        return self.matches.list_matches_for_user(user_id, status)

    def update_match_status(self, match_id: str, user_id: str, status: str) -> TeammateMatch:
        return self.matches.update_match_status(match_id, user_id, status)

    # --- Notifications ---

    def insert_notifications(self, records: Sequence[Dict[str, Any]]) -> List[Notification]:
        return self.notifications.insert_notifications(records)

    def list_notifications(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        return self.notifications.list_notifications(user_id, unread_only)

    def mark_notification_read(self, notification_id: str) -> Optional[Notification]:
        return self.notifications.mark_notification_read(notification_id)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
