#!/usr/bin/env python3
"""
Match endpoints - view and respond to teammate matches.
"""

import logging
from fastapi import APIRouter, Depends, Query

from database.repository import MatchingRepository
from ..dependencies import get_repository
from ..services.match_service import MatchService
from ..models.requests import MatchResponseRequest
from ..models.responses import MatchesResponse, MatchRespondResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("", response_model=MatchesResponse)
def get_matches(
    user_id: str = Query(..., min_length=1, description="User whose matches to list"),
    status: str = Query(
        default="all",
        pattern="^(pending|accepted|rejected|all)$",
        description="Match status: pending, accepted, rejected, or all"
    ),
    repo: MatchingRepository = Depends(get_repository)
):
    """
    Get the teammate matches of a user, newest first.

    Each match carries the other user's profile summary.
    """
    service = MatchService(repo)
    matches = service.get_matches(user_id, None if status == "all" else status)

    return MatchesResponse(
        success=True,
        count=len(matches),
        matches=matches
    )


@router.post("/{match_id}/respond", response_model=MatchRespondResponse)
def respond_to_match(
    match_id: str,
    request: MatchResponseRequest,
    repo: MatchingRepository = Depends(get_repository)
):
    """
    Accept or reject a pending match.

    Only the two matched users may respond, and only once.
    """
    service = MatchService(repo)
    new_status = service.respond(match_id, request.user_id, request.accept)

    return MatchRespondResponse(
        success=True,
        match_id=match_id,
        status=new_status
    )
