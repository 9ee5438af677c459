"""Request dependencies: per-request session, services built by constructor injection, and identity guards."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from bookreviewhub.core.context import IdentityContext, SecurityContext
from bookreviewhub.core.database import get_db
from bookreviewhub.core.exceptions import AccessDeniedError, AuthenticationRequiredError
from bookreviewhub.models.user import Role
from bookreviewhub.repositories import BookRepository, UserRepository
from bookreviewhub.services.auth_service import AuthenticationManager, AuthService
from bookreviewhub.services.book_service import BookService
from bookreviewhub.services.user_details import UserDetailsService


def get_security_context(request: Request) -> SecurityContext:
    """Return the request's SecurityContext, attaching an empty one on first use."""
    security = getattr(request.state, "security", None)
    if security is None:
        security = SecurityContext()
        request.state.security = security
    return security


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_auth_service(
    request: Request,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> AuthService:
    return AuthService(
        users,
        AuthenticationManager(UserDetailsService(users)),
        request.app.state.settings,
    )


def get_book_service(db: Annotated[Session, Depends(get_db)]) -> BookService:
    return BookService(BookRepository(db))


def require_authenticated(
    security: Annotated[SecurityContext, Depends(get_security_context)],
) -> IdentityContext:
    """Dependency: return the current identity. Raises AuthenticationRequiredError if none was established."""
    if security.identity is None:
        raise AuthenticationRequiredError()
    return security.identity


def require_roles(*roles: Role) -> Callable[..., IdentityContext]:
    """Build a dependency that admits only identities holding one of roles (403 otherwise)."""

    def dependency(
        identity: Annotated[IdentityContext, Depends(require_authenticated)],
    ) -> IdentityContext:
        if not identity.has_role(*roles):
            raise AccessDeniedError()
        return identity

    return dependency
