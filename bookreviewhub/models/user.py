"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import Column, DateTime, Enum, Integer, String, func

from bookreviewhub.models.base import Base


class Role(str, enum.Enum):
    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class Status(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BANNED = "BANNED"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    Username and email are unique. hashed_password holds a bcrypt hash, never
    the plain password. Rows are never deleted.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(
        Enum(Role, name="user_role", native_enum=False, length=16),
        nullable=False,
        default=Role.USER,
    )
    status = Column(
        Enum(Status, name="user_status", native_enum=False, length=16),
        nullable=False,
        default=Status.ACTIVE,
    )
    first_name = Column(String(255), nullable=False)
    middle_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
    last_login_at = Column(DateTime(timezone=True), nullable=True)
