"""Background execution of matching runs for CollabMatch."""

from .tasks import MatchingTaskDispatcher, run_event_matching_task

__all__ = ['MatchingTaskDispatcher', 'run_event_matching_task']
