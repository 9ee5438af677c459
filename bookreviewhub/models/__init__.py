"""SQLAlchemy ORM models."""

from bookreviewhub.models.base import Base
from bookreviewhub.models.book import Book
from bookreviewhub.models.user import Role, Status, User

__all__ = ["Base", "Book", "Role", "Status", "User"]
