"""Book catalogue: listing and starter data."""

import logging

from bookreviewhub.models.book import Book
from bookreviewhub.repositories.book_repository import BookRepository

logger = logging.getLogger(__name__)

# (title, author) inserted by seed_defaults when missing.
DEFAULT_BOOKS = (
    ("Clean Code", "Robert C. Martin"),
    ("Effective Java", "Joshua Bloch"),
)


class BookService:
    def __init__(self, books: BookRepository):
        self.books = books

    def list_books(self) -> list[Book]:
        return self.books.list_all()

    def seed_defaults(self) -> int:
        """Insert DEFAULT_BOOKS that are not present yet; return how many were added. Idempotent."""
        added = 0
        for title, author in DEFAULT_BOOKS:
            if self.books.find_by_title(title) is not None:
                continue
            self.books.save(Book(title=title, author=author))
            added += 1
        if added:
            logger.info("Seeded %s book(s)", added)
        return added
