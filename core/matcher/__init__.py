"""Matcher Module - per-user data bundles and pairwise match orchestration.

Services live in core.matcher.service and core.matcher.fetcher; only the
plain DTOs are re-exported here so the scorers can import them without
pulling in the database layer.
"""
from core.matcher.dto import (
    Profile, ProjectInfo, PostSummary, ProjectSummary, EnhancedUserData,
    parse_self_reported_projects, parse_experience
)

__all__ = [
    'Profile', 'ProjectInfo', 'PostSummary', 'ProjectSummary', 'EnhancedUserData',
    'parse_self_reported_projects', 'parse_experience'
]
