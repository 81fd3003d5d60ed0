#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class ProfileSummary(BaseModel):
    """Public part of a user profile shown next to matches and recommendations."""
    user_id: str
    display_name: str
    username: Optional[str] = None
    college: Optional[str] = None
    skills: List[str] = []
    interests: List[str] = []


class RecommendationSummary(BaseModel):
    """A stored team recommendation."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "recommendation_id": "550e8400-e29b-41d4-a716-446655440000",
                "project_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "user_id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "compatibility_score": 0.85,
                "matching_skills": ["python", "react"],
                "reason": "⭐ Strong match! Has 2 of 2 required skills: python, react. Highly recommended!",
                "created_at": "2026-02-01T12:00:00"
            }
        }
    )

    recommendation_id: str
    project_id: str
    user_id: str
    compatibility_score: float = Field(ge=0, le=1)
    matching_skills: List[str] = []
    reason: Optional[str] = None
    created_at: Optional[str] = None
    profile: Optional[ProfileSummary] = None


class RecommendationsResponse(BaseModel):
    success: bool
    project_id: str
    count: int
    recommendations: List[RecommendationSummary]


class EventInterestResponse(BaseModel):
    """Result of marking interest; matching runs in the background."""
    success: bool
    event_id: str
    user_id: str
    already_interested: bool
    matching_job_id: Optional[str] = None


class TeammateMatchSummary(BaseModel):
    """A teammate match as seen by one of its two users."""
    match_id: str
    event_id: str
    event_title: Optional[str] = None
    status: str
    compatibility_score: float = Field(ge=0, le=1)
    matching_skills: List[str] = []
    matching_interests: List[str] = []
    ai_reasoning: Optional[str] = None
    created_at: Optional[str] = None
    teammate: Optional[ProfileSummary] = None


class MatchesResponse(BaseModel):
    success: bool
    count: int
    matches: List[TeammateMatchSummary]


class MatchRespondResponse(BaseModel):
    success: bool
    match_id: str
    status: str


class NotificationItem(BaseModel):
    notification_id: str
    type: str
    title: str
    message: str
    link: Optional[str] = None
    metadata: Dict[str, Any] = {}
    is_read: bool
    created_at: Optional[str] = None


class NotificationsResponse(BaseModel):
    success: bool
    count: int
    notifications: List[NotificationItem]


class MarkReadResponse(BaseModel):
    success: bool
    notification_id: str
    is_read: bool
