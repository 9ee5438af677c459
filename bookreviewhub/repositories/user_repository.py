"""Credential store: lookup and persistence of user records."""

from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookreviewhub.models.user import User


class UserRepository:
    """User queries and writes over a single session."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def find_by_email(self, email: str) -> User | None:
        return self.session.query(User).filter(User.email == email).first()

    def exists_by_username(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def list_all(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()

    def save(self, user: User) -> User:
        """
        Insert or update user and commit.
        Raises IntegrityError (after rollback) when a unique constraint is violated.
        """
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def record_login(self, user_id: int, when: datetime) -> None:
        """Set last_login_at (updated_at follows through onupdate) and commit."""
        self.session.query(User).filter(User.id == user_id).update(
            {User.last_login_at: when}, synchronize_session=False
        )
        self.session.commit()
