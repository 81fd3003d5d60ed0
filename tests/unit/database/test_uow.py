#!/usr/bin/env python3
"""
Tests for the per-run transaction scope.
"""
import pytest
from sqlalchemy.orm import sessionmaker

from database.models import Profile
from database.repository import MatchingRepository
from database.uow import matching_uow


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


def test_commits_on_success(session_factory, db_session):
    with matching_uow(session_factory) as repo:
        assert isinstance(repo, MatchingRepository)
        repo.db.add(Profile(id="u1", full_name="Alice"))

    assert db_session.get(Profile, "u1") is not None


def test_rolls_back_on_error(session_factory, db_session):
    with pytest.raises(RuntimeError):
        with matching_uow(session_factory) as repo:
            repo.db.add(Profile(id="u1", full_name="Alice"))
            repo.db.flush()
            raise RuntimeError("run aborted")

    assert db_session.get(Profile, "u1") is None
