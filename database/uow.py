import contextlib

from database.database import db_session_scope
from database.repository import MatchingRepository


@contextlib.contextmanager
def matching_uow(session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a MatchingRepository bound to a fresh Session from
    db_session_scope, which commits on success, rolls back on exception
    and always closes.

    Match inserts, recommendation replacement and notification inserts
    commit on their own so one failed pair never undoes earlier work.

    Usage:
        with matching_uow() as repo:
            service = TeammateMatchService(repo, scorer, notifier)
            service.find_event_teammates(event_id)
    """
    with db_session_scope(session_factory) as session:
        yield MatchingRepository(session)
