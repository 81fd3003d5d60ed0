#!/usr/bin/env python3
"""
Project endpoints - team recommendations.
"""

import logging
from fastapi import APIRouter, Depends

from core.config_loader import AppConfig
from database.repository import MatchingRepository
from ..dependencies import get_repository, get_app_config
from ..services.recommendation_service import RecommendationService
from ..models.responses import RecommendationsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


def get_recommendation_service(
    repo: MatchingRepository = Depends(get_repository),
    config: AppConfig = Depends(get_app_config)
) -> RecommendationService:
    """Dependency to get recommendation service."""
    return RecommendationService(repo, config)


@router.post("/{project_id}/recommendations", response_model=RecommendationsResponse)
def generate_recommendations(
    project_id: str,
    service: RecommendationService = Depends(get_recommendation_service)
):
    """
    Generate team recommendations for a project.

    Replaces any previously stored recommendations. Members and the owner
    are never recommended.
    """
    recommendations = service.generate(project_id)
    return RecommendationsResponse(
        success=True,
        project_id=project_id,
        count=len(recommendations),
        recommendations=recommendations
    )


@router.get("/{project_id}/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    project_id: str,
    service: RecommendationService = Depends(get_recommendation_service)
):
    """Stored recommendations for a project, best score first."""
    recommendations = service.list(project_id)
    return RecommendationsResponse(
        success=True,
        project_id=project_id,
        count=len(recommendations),
        recommendations=recommendations
    )
