"""API route handlers."""

from .projects import router as projects_router
from .events import router as events_router
from .matches import router as matches_router
from .notifications import router as notifications_router
