"""
Insert the starter books if they are missing. Run from project root:

  python -m bookreviewhub.scripts.seed_books
"""

import logging
import sys

from bookreviewhub.core.config import get_settings
from bookreviewhub.core.database import SessionLocal
from bookreviewhub.core.logging_config import configure_logging
from bookreviewhub.repositories.book_repository import BookRepository
from bookreviewhub.services.book_service import BookService

logger = logging.getLogger(__name__)


def main() -> int:
    configure_logging(get_settings().LOG_LEVEL)
    db = SessionLocal()
    try:
        added = BookService(BookRepository(db)).seed_defaults()
        logger.info("Book seeding completed: added=%s", added)
        return 0
    except Exception as e:
        logger.exception("Book seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
