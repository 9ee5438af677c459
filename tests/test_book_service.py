"""Unit tests for bookreviewhub.services.book_service: idempotent seeding of starter books."""

import unittest
from unittest.mock import MagicMock

from bookreviewhub.models import Book
from bookreviewhub.services.book_service import DEFAULT_BOOKS, BookService


class TestSeedDefaults(unittest.TestCase):
    def test_inserts_missing_books(self) -> None:
        books = MagicMock()
        books.find_by_title.return_value = None
        added = BookService(books).seed_defaults()
        self.assertEqual(added, len(DEFAULT_BOOKS))
        saved = [call.args[0] for call in books.save.call_args_list]
        self.assertEqual([(b.title, b.author) for b in saved], list(DEFAULT_BOOKS))

    def test_skips_existing_books(self) -> None:
        books = MagicMock()
        books.find_by_title.side_effect = lambda title: (
            Book(id=1, title=title, author="x") if title == "Clean Code" else None
        )
        added = BookService(books).seed_defaults()
        self.assertEqual(added, 1)
        books.save.assert_called_once()
        self.assertEqual(books.save.call_args.args[0].title, "Effective Java")

    def test_second_run_adds_nothing(self) -> None:
        books = MagicMock()
        books.find_by_title.return_value = Book(id=1, title="t", author="a")
        self.assertEqual(BookService(books).seed_defaults(), 0)
        books.save.assert_not_called()


if __name__ == "__main__":
    unittest.main()
