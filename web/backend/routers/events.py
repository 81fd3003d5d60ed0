#!/usr/bin/env python3
"""
Event endpoints - interest and teammate matching.
"""

from fastapi import APIRouter, Depends

from database.repository import MatchingRepository
from pipeline.tasks import MatchingTaskDispatcher
from ..dependencies import get_repository, get_dispatcher
from ..services.event_service import EventInterestService
from ..models.requests import EventInterestRequest
from ..models.responses import EventInterestResponse

router = APIRouter(prefix="/api/events", tags=["events"])


def get_event_service(
    repo: MatchingRepository = Depends(get_repository),
    dispatcher: MatchingTaskDispatcher = Depends(get_dispatcher)
) -> EventInterestService:
    return EventInterestService(repo, dispatcher)


@router.post("/{event_id}/interest", response_model=EventInterestResponse)
def mark_interest(
    event_id: str,
    request: EventInterestRequest,
    service: EventInterestService = Depends(get_event_service)
):
    """
    Mark an event as interesting for a user.

    New interest triggers teammate matching for the event in the
    background; matching failures never affect this response.
    """
    already_interested, job_id = service.mark_interest(event_id, request.user_id)
    return EventInterestResponse(
        success=True,
        event_id=event_id,
        user_id=request.user_id,
        already_interested=already_interested,
        matching_job_id=job_id
    )
