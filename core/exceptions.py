"""
Domain exceptions shared by the matching core, the repositories and the web layer.
"""


class CollabMatchError(Exception):
    """Base exception for matching-core errors."""
    pass


class ConfigurationError(CollabMatchError):
    """Raised when required configuration (e.g. the scorer credential) is missing."""
    pass


class ProjectNotFoundError(CollabMatchError):
    """Raised when recommendations are requested for an unknown project."""
    pass


class MatchNotFoundError(CollabMatchError):
    """Raised when a teammate match does not exist."""
    pass


class InvalidMatchTransitionError(CollabMatchError):
    """Raised when a match status change is not allowed (e.g. already accepted)."""
    pass


class DuplicateMatchError(CollabMatchError):
    """Raised by the store when a match for the same unordered pair already exists."""

    def __init__(self, event_id: str, user_a: str, user_b: str):
        self.event_id = event_id
        self.user_a = user_a
        self.user_b = user_b
        super().__init__(f"Match already exists for event {event_id}: {user_a} <-> {user_b}")


class EventNotFoundError(CollabMatchError):
    """Raised when interest is recorded for an unknown event."""
    pass
