import logging
from typing import Iterable, List, Optional

from sqlalchemy import select

from database.models import Profile, Post, Project
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProfileRepository(BaseRepository):
    def get_profile(self, user_id: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_profiles(self, user_ids: Iterable[str]) -> List[Profile]:
        ids = list(user_ids)
        if not ids:
            return []
        stmt = select(Profile).where(Profile.id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())

    def list_recent_posts(self, user_id: str, limit: int = 10) -> List[Post]:
        """Newest posts first."""
        stmt = (
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_recent_projects(self, user_id: str, limit: int = 10) -> List[Project]:
        """Newest projects owned by the user first."""
        stmt = (
            select(Project)
            .where(Project.owner_id == user_id)
            .order_by(Project.created_at.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_candidates(self, exclude_ids: Iterable[str]) -> List[Profile]:
        """All profiles except the excluded ids."""
        excluded = [str(i) for i in exclude_ids if i is not None]
        stmt = select(Profile)
        if excluded:
            stmt = stmt.where(Profile.id.notin_(excluded))
        stmt = stmt.order_by(Profile.created_at)
        return list(self.db.execute(stmt).scalars().all())
