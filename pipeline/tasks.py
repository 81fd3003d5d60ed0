#!/usr/bin/env python3
"""
Background dispatch of teammate matching runs.

Marking interest in an event triggers a matching run for that event.
Runs are queued on Redis (RQ) so the user action returns immediately;
when the queue is disabled or Redis is unreachable they run on a
background thread of the current process.

Usage:
    from pipeline.tasks import MatchingTaskDispatcher

    dispatcher = MatchingTaskDispatcher(redis_url, use_async_queue=True)
    dispatcher.dispatch_event_matching(event_id)
"""

import logging
import threading
from typing import Any, Dict, Optional

from redis import Redis
from rq import Queue

from core.app_context import AppContext
from core.config_loader import get_config

logger = logging.getLogger(__name__)

DEFAULT_REDIS_URL = 'redis://localhost:6379/0'


def run_event_matching_task(event_id: str) -> Optional[Dict[str, Any]]:
    """
    Run teammate matching for an event (called by RQ worker or inline).

    This is the outermost error boundary for a run: failures are logged
    and swallowed so they never reach the action that triggered them.

    Returns:
        The run summary, or None when the run failed.
    """
    # Imported here so enqueueing never opens a database engine
    from database.uow import matching_uow

    logger.info(f"Starting teammate matching for event {event_id}")
    try:
        ctx = AppContext.build(get_config())
        with matching_uow() as repo:
            result = ctx.teammate_service(repo).find_event_teammates(event_id)
    except Exception as e:
        logger.error(f"Teammate matching for event {event_id} failed: {e}", exc_info=True)
        return None

    return result.to_dict()


class MatchingTaskDispatcher:
    def __init__(
        self,
        redis_url: Optional[str] = None,
        use_async_queue: bool = True,
        queue_name: str = 'matching',
        job_timeout: str = '10m'
    ):
        self.redis_url = redis_url or DEFAULT_REDIS_URL
        self.queue_name = queue_name
        self.job_timeout = job_timeout

        if not use_async_queue:
            logger.info("Async queue disabled via config. Using sync mode.")
            self.redis_conn = None
            self.queue = None
            self.async_mode = False
            return

        try:
            self.redis_conn = Redis.from_url(self.redis_url)
            # Validate connection with ping before using
            self.redis_conn.ping()
            self.queue = Queue(queue_name, connection=self.redis_conn)
            self.async_mode = True
            logger.info(f"Matching dispatcher connected to Redis (queue: {queue_name})")
        except Exception as e:
            logger.error(f"Redis connection failed: {e}. Falling back to sync mode.")
            self.redis_conn = None
            self.queue = None
            self.async_mode = False

    def dispatch_event_matching(self, event_id: str) -> Optional[str]:
        """
        Queue teammate matching for an event, or start it on a background
        thread when no queue is available. Never blocks on the run itself.

        Returns:
            RQ job id in async mode, None in sync mode.
        """
        if self.async_mode:
            try:
                job = self.queue.enqueue(
                    run_event_matching_task,
                    event_id,
                    job_timeout=self.job_timeout,
                    result_ttl=86400,
                    description=f"teammate matching for event {event_id}"
                )
                logger.info(f"Queued teammate matching for event {event_id}: job {job.id}")
                return job.id
            except Exception as e:
                logger.error(f"Failed to enqueue matching for event {event_id}: {e}. Running in background thread.")

        self._start_background_run(event_id)
        return None

    def _start_background_run(self, event_id: str) -> threading.Thread:
        thread = threading.Thread(
            target=run_event_matching_task,
            args=(event_id,),
            name=f"event-matching-{event_id}",
            daemon=True
        )
        thread.start()
        return thread
