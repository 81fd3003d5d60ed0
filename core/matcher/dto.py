"""Data Transfer Objects for the matching core.

DTOs are used to transfer data outside of the Unit of Work context,
allowing ORM rows to be converted to plain Python objects that the
scorers can consume without touching the database session.

Some profile columns hold JSON serialized into text (self-reported
projects, experience). They are parsed here into typed structures;
a parse failure degrades to an empty structure instead of raising.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import List, Any, Optional

logger = logging.getLogger(__name__)

# Bump when the JSON-in-text layout of profile columns changes
PROFILE_TEXT_FORMAT_VERSION = 1


@dataclass(frozen=True)
class SelfReportedProject:
    """A project a user listed on their own profile (not a platform project)."""
    title: str = ""
    description: str = ""
    link: Optional[str] = None


@dataclass(frozen=True)
class ExperienceEntry:
    """One entry of the profile's free-form experience list."""
    title: str = ""
    organization: str = ""
    description: str = ""


@dataclass
class Profile:
    """Candidate profile as seen by the scorers (read-only)."""
    id: str
    display_name: str = ""
    skills: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)
    bio: Optional[str] = None
    experience: Optional[str] = None
    college: Optional[str] = None
    projects: Optional[str] = None  # raw JSON text, see parse_self_reported_projects


@dataclass
class ProjectInfo:
    """Target project for recommendation generation."""
    id: str
    title: str
    description: str = ""
    required_skills: List[str] = field(default_factory=list)
    owner_id: Optional[str] = None


@dataclass
class PostSummary:
    content: str
    tags: List[str] = field(default_factory=list)


@dataclass
class ProjectSummary:
    title: str
    description: str = ""
    tags: List[str] = field(default_factory=list)


@dataclass
class EnhancedUserData:
    """Per-candidate bundle built for one matching run (not persisted)."""
    profile: Profile
    posts: List[PostSummary] = field(default_factory=list)
    projects: List[ProjectSummary] = field(default_factory=list)

    @property
    def activity_count(self) -> int:
        """Number of posts + projects available for enriched analysis."""
        return len(self.posts) + len(self.projects)


def _load_json_list(raw: Optional[str]) -> List[Any]:
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring unparseable JSON profile field")
        return []
    return data if isinstance(data, list) else []


def parse_self_reported_projects(raw: Optional[str], version: int = PROFILE_TEXT_FORMAT_VERSION) -> List[SelfReportedProject]:
    """Parse the profile ``projects`` text column.

    Version 1 layout is a JSON array of objects with optional
    ``title``, ``description`` and ``link`` keys. Entries that are not
    objects are skipped.
    """
    if version != PROFILE_TEXT_FORMAT_VERSION:
        logger.warning(f"Unsupported profile projects format version {version}")
        return []

    projects = []
    for item in _load_json_list(raw):
        if not isinstance(item, dict):
            continue
        projects.append(SelfReportedProject(
            title=str(item.get('title') or ''),
            description=str(item.get('description') or ''),
            link=item.get('link'),
        ))
    return projects


def parse_experience(raw: Optional[str], version: int = PROFILE_TEXT_FORMAT_VERSION) -> List[ExperienceEntry]:
    """Parse the profile ``experience`` text column (JSON array, version 1)."""
    if version != PROFILE_TEXT_FORMAT_VERSION:
        logger.warning(f"Unsupported profile experience format version {version}")
        return []

    entries = []
    for item in _load_json_list(raw):
        if not isinstance(item, dict):
            continue
        entries.append(ExperienceEntry(
            title=str(item.get('title') or item.get('role') or ''),
            organization=str(item.get('organization') or item.get('company') or ''),
            description=str(item.get('description') or ''),
        ))
    return entries


def describe_experience(raw: Optional[str]) -> Optional[str]:
    """Render the experience column for prompts.

    Structured entries are flattened to ``title at organization`` lines;
    anything that is not a JSON list is passed through as plain text.
    """
    if not raw:
        return None
    entries = parse_experience(raw)
    if not entries:
        return raw
    parts = []
    for entry in entries:
        label = entry.title
        if entry.organization:
            label = f"{label} at {entry.organization}" if label else entry.organization
        if entry.description:
            label = f"{label} ({entry.description})" if label else entry.description
        if label:
            parts.append(label)
    return "; ".join(parts) or None


def _as_str_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


def profile_from_orm(row) -> Profile:
    """Convert a profiles ORM row to a Profile DTO."""
    return Profile(
        id=str(row.id),
        display_name=row.full_name or row.username or "",
        skills=_as_str_list(row.skills),
        interests=_as_str_list(row.interests),
        bio=row.bio,
        experience=row.experience,
        college=row.college,
        projects=row.projects,
    )


def project_from_orm(row) -> ProjectInfo:
    """Convert a projects ORM row to a ProjectInfo DTO."""
    return ProjectInfo(
        id=str(row.id),
        title=row.title or "",
        description=row.description or "",
        required_skills=_as_str_list(row.required_skills),
        owner_id=str(row.owner_id) if row.owner_id is not None else None,
    )


def post_summary_from_orm(row) -> PostSummary:
    return PostSummary(content=row.content or "", tags=_as_str_list(row.tags))


def project_summary_from_orm(row) -> ProjectSummary:
    return ProjectSummary(
        title=row.title or "",
        description=row.description or "",
        tags=_as_str_list(row.tags),
    )
