#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from core.config_loader import AppConfig, get_config
from database.repository import MatchingRepository
from pipeline.tasks import MatchingTaskDispatcher


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    from database.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_repository(db: Session = Depends(get_db)) -> MatchingRepository:
    """Record-store facade bound to the request's session."""
    return MatchingRepository(db)


def get_app_config() -> AppConfig:
    return get_config()


@lru_cache()
def get_dispatcher() -> MatchingTaskDispatcher:
    """
    Process-wide dispatcher for background matching runs.

    Connects to Redis once; falls back to inline runs when unavailable.
    """
    tasks = get_config().tasks
    return MatchingTaskDispatcher(
        redis_url=tasks.redis_url,
        use_async_queue=tasks.use_async_queue,
        queue_name=tasks.queue_name,
        job_timeout=tasks.job_timeout
    )
