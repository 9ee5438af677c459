"""Lookup and persistence of books."""

from sqlalchemy.orm import Session

from bookreviewhub.models.book import Book


class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> list[Book]:
        return self.session.query(Book).order_by(Book.id).all()

    def find_by_title(self, title: str) -> Book | None:
        return self.session.query(Book).filter(Book.title == title).first()

    def save(self, book: Book) -> Book:
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        return book
