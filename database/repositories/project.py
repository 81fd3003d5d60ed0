import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select, delete

from database.models import Project, ProjectMember, TeamRecommendation
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProjectRepository(BaseRepository):
    def get_project(self, project_id: str) -> Optional[Project]:
        stmt = select(Project).where(Project.id == project_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_project_members(self, project_id: str) -> List[str]:
        """User ids of the project's members (owner not included)."""
        stmt = select(ProjectMember.user_id).where(ProjectMember.project_id == project_id)
        return [str(user_id) for user_id in self.db.execute(stmt).scalars().all()]

    def replace_recommendations(
        self,
        project_id: str,
        records: Sequence[Dict[str, Any]]
    ) -> List[TeamRecommendation]:
        """
        Atomically replace every recommendation of a project.

        The delete and the inserts commit together; on failure the previous
        recommendations are left untouched.
        """
        try:
            self.db.execute(
                delete(TeamRecommendation).where(TeamRecommendation.project_id == project_id)
            )
            rows = []
            for record in records:
                row = TeamRecommendation(
                    project_id=project_id,
                    recommended_user_id=record['recommended_user_id'],
                    compatibility_score=record['compatibility_score'],
                    matching_skills=list(record.get('matching_skills') or []),
                    reason=record.get('reason'),
                )
                self.db.add(row)
                rows.append(row)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.debug(f"Stored {len(rows)} recommendations for project {project_id}")
        return rows

    def get_team_recommendations(self, project_id: str) -> List[TeamRecommendation]:
        """Stored recommendations for a project, best score first."""
        stmt = (
            select(TeamRecommendation)
            .where(TeamRecommendation.project_id == project_id)
            .order_by(TeamRecommendation.compatibility_score.desc())
        )
        return list(self.db.execute(stmt).scalars().all())
