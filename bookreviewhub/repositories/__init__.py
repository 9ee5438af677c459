"""Persistence access for ORM models; each repository wraps one SQLAlchemy session."""

from bookreviewhub.repositories.book_repository import BookRepository
from bookreviewhub.repositories.user_repository import UserRepository

__all__ = ["BookRepository", "UserRepository"]
