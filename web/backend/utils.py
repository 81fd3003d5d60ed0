#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from decimal import Decimal
from typing import Optional, Any, List
from datetime import datetime

from .models.responses import ProfileSummary


def safe_float(value: Optional[Any], default: float = 0.0) -> float:
    """
    Safely convert value to float.

    Args:
        value: Value to convert (can be Decimal, int, float, or None).
        default: Default value if conversion fails or value is None.

    Returns:
        Float value.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_str_list(value: Optional[Any]) -> List[str]:
    """Normalize a JSON column that should hold a list of strings."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def profile_summary(profile) -> Optional[ProfileSummary]:
    """Build the public profile summary for a profiles row (None stays None)."""
    if profile is None:
        return None
    return ProfileSummary(
        user_id=str(profile.id),
        display_name=profile.full_name or profile.username or "",
        username=profile.username,
        college=profile.college,
        skills=safe_str_list(profile.skills),
        interests=safe_str_list(profile.interests),
    )
