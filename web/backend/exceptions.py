#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ProjectNotFoundException(ServiceException):
    """Raised when a project is not found."""
    pass


class EventNotFoundException(ServiceException):
    """Raised when an event is not found."""
    pass


class UserNotFoundException(ServiceException):
    """Raised when a user profile is not found."""
    pass


class MatchNotFoundException(ServiceException):
    """Raised when a teammate match is not found."""
    pass


class NotificationNotFoundException(ServiceException):
    """Raised when a notification is not found."""
    pass


class InvalidMatchActionException(ServiceException):
    """Raised when a match cannot be accepted or rejected by this user."""
    pass


NOT_FOUND_EXCEPTIONS = (
    ProjectNotFoundException,
    EventNotFoundException,
    UserNotFoundException,
    MatchNotFoundException,
    NotificationNotFoundException,
)


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, NOT_FOUND_EXCEPTIONS):
        status_code = 404
    elif isinstance(exc, InvalidMatchActionException):
        status_code = 400

    if status_code == 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
