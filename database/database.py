import os
import contextlib
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from core.config_loader import get_config

DATABASE_URL = os.environ.get("DATABASE_URL") or get_config().database.url

engine = create_engine(DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextlib.contextmanager
def db_session_scope(session_factory=None):
    """Commit on success, roll back on any exception, always close."""
    session = (session_factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
