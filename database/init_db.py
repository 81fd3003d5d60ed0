import logging

from tenacity import retry, stop_after_attempt, wait_fixed

from database.database import engine
from database.models import Base

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(bind=None) -> None:
    """Create all tables that do not exist yet (retried while the database starts up)."""
    target = bind or engine
    logger.info("Creating database tables...")
    try:
        Base.metadata.create_all(bind=target)
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    init_db()
