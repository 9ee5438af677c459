"""ORM model for books that users review."""

from sqlalchemy import Column, Integer, String

from bookreviewhub.models.base import Base


class Book(Base):
    """A book in the catalogue."""

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False, index=True)
    author = Column(String(255), nullable=False)
