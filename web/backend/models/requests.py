#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field


class EventInterestRequest(BaseModel):
    """Mark an event as interesting for a user."""
    user_id: str = Field(..., min_length=1, description="Interested user's profile id")


class MatchResponseRequest(BaseModel):
    """Accept or reject a pending teammate match."""
    user_id: str = Field(..., min_length=1, description="Responding user's profile id")
    accept: bool = Field(..., description="True to accept, False to reject")
