#!/usr/bin/env python3
"""
Enhanced Data Fetcher - builds the per-user bundle used for teammate scoring.

Each bundle holds the profile plus the most recent posts and owned
projects. A missing profile excludes the user from the run; failures
reading posts or projects only cost that user the enriched context.
"""
import logging
from typing import Dict, Iterable, Optional

from database.repository import MatchingRepository
from core.matcher.dto import (
    EnhancedUserData, profile_from_orm, post_summary_from_orm, project_summary_from_orm
)

DEFAULT_RECENT_LIMIT = 10


class EnhancedDataFetcher:
    def __init__(
        self,
        repo: MatchingRepository,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        logger: Optional[logging.Logger] = None
    ):
        self.repo = repo
        self.recent_limit = recent_limit
        self.logger = logger or logging.getLogger(__name__)

    def _rollback(self) -> None:
        try:
            self.repo.rollback()
        except Exception as e:
            self.logger.warning(f"Rollback after a failed read did not complete: {e}")

    def fetch(self, user_id: str) -> Optional[EnhancedUserData]:
        """
        Fetch profile, recent posts and recent projects for a user.

        Returns:
            The bundle, or None when the profile is missing or cannot be read.
        """
        try:
            row = self.repo.get_profile(user_id)
        except Exception as e:
            self.logger.error(f"Error fetching profile for {user_id}: {e}")
            self._rollback()
            return None

        if row is None:
            self.logger.warning(f"Profile {user_id} not found, skipping")
            return None

        profile = profile_from_orm(row)

        try:
            posts = [
                post_summary_from_orm(p)
                for p in self.repo.list_recent_posts(user_id, self.recent_limit)
            ]
        except Exception as e:
            self.logger.error(f"Error fetching posts for {user_id}: {e}")
            self._rollback()
            posts = []

        try:
            projects = [
                project_summary_from_orm(p)
                for p in self.repo.list_recent_projects(user_id, self.recent_limit)
            ]
        except Exception as e:
            self.logger.error(f"Error fetching projects for {user_id}: {e}")
            self._rollback()
            projects = []

        return EnhancedUserData(profile=profile, posts=posts, projects=projects)

    def fetch_many(self, user_ids: Iterable[str]) -> Dict[str, EnhancedUserData]:
        """Fetch bundles for several users, dropping the ones that fail."""
        bundles: Dict[str, EnhancedUserData] = {}
        for user_id in user_ids:
            data = self.fetch(user_id)
            if data is not None:
                bundles[user_id] = data
        return bundles
