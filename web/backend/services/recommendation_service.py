#!/usr/bin/env python3
"""
Recommendation service - generate and list team recommendations for a project.
"""

import logging
from typing import List

from core.config_loader import AppConfig
from core.exceptions import ProjectNotFoundError
from core.matcher.service import TeamRecommendationService
from database.models import TeamRecommendation
from database.repository import MatchingRepository
from notification.service import NotificationService
from ..models.responses import RecommendationSummary
from ..utils import safe_float, safe_str_list, safe_datetime_iso, profile_summary
from ..exceptions import ProjectNotFoundException

logger = logging.getLogger(__name__)


class RecommendationService:
    """Web-facing wrapper around TeamRecommendationService."""

    def __init__(self, repo: MatchingRepository, config: AppConfig):
        self.repo = repo
        self.config = config

    def _summaries(self, rows: List[TeamRecommendation]) -> List[RecommendationSummary]:
        profiles = {p.id: p for p in self.repo.get_profiles(r.recommended_user_id for r in rows)}
        return [
            RecommendationSummary(
                recommendation_id=str(row.id),
                project_id=str(row.project_id),
                user_id=str(row.recommended_user_id),
                compatibility_score=safe_float(row.compatibility_score),
                matching_skills=safe_str_list(row.matching_skills),
                reason=row.reason,
                created_at=safe_datetime_iso(row.created_at),
                profile=profile_summary(profiles.get(row.recommended_user_id)),
            )
            for row in rows
        ]

    def generate(self, project_id: str) -> List[RecommendationSummary]:
        """Replace the project's recommendations and return the new ones."""
        service = TeamRecommendationService(
            self.repo,
            config=self.config.matching.recommendations,
            notifier=NotificationService(self.repo)
        )
        try:
            rows = service.generate(project_id)
        except ProjectNotFoundError as e:
            raise ProjectNotFoundException(str(e)) from e
        return self._summaries(rows)

    def list(self, project_id: str) -> List[RecommendationSummary]:
        """Stored recommendations, best first."""
        if self.repo.get_project(project_id) is None:
            raise ProjectNotFoundException(f"Project {project_id} not found")
        return self._summaries(self.repo.get_team_recommendations(project_id))
