"""
Bearer token verification and the default-deny authorization step.

JwtAuthenticationMiddleware runs first. A request without a Bearer header
passes through unauthenticated. A request with a Bearer header either gets an
identity on its SecurityContext or is answered with 401 there, without
reaching anything downstream.

AuthorizationGuardMiddleware runs next and rejects every non-public request
that still has no identity, including paths no route matches.
"""

import logging
from collections.abc import Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from bookreviewhub.api.deps import get_security_context
from bookreviewhub.core.config import Settings
from bookreviewhub.core.exceptions import InvalidTokenError, UserNotFoundError
from bookreviewhub.core.security import extract_username, is_token_valid
from bookreviewhub.repositories.user_repository import UserRepository
from bookreviewhub.services.user_details import UserDetails, UserDetailsService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

UNAUTHORIZED_MESSAGE = "Unauthorized"
INVALID_TOKEN_MESSAGE = "Invalid JWT token"
INVALID_OR_EXPIRED_TOKEN_MESSAGE = "Invalid or expired JWT token"


def public_prefixes_for(api_prefix: str) -> tuple[str, ...]:
    """Paths reachable without an identity: auth endpoints, health and the API docs."""
    return (
        f"{api_prefix}/auth/",
        f"{api_prefix}/health",
        "/docs",
        "/redoc",
        "/openapi.json",
    )


DEFAULT_PUBLIC_PREFIXES = public_prefixes_for("/api")


def is_public_path(path: str, public_prefixes: tuple[str, ...]) -> bool:
    return any(path.startswith(prefix) for prefix in public_prefixes)


def unauthorized_response(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": reason},
        headers={"WWW-Authenticate": "Bearer"},
    )


class JwtAuthenticationMiddleware(BaseHTTPMiddleware):
    """Establish the caller's identity from an `Authorization: Bearer <token>` header."""

    def __init__(
        self,
        app: ASGIApp,
        session_factory: Callable[[], Session],
        settings: Settings,
        exempt_prefixes: tuple[str, ...] = DEFAULT_PUBLIC_PREFIXES,
    ) -> None:
        super().__init__(app)
        self.session_factory = session_factory
        self.settings = settings
        self.exempt_prefixes = exempt_prefixes

    def is_exempt(self, path: str) -> bool:
        return is_public_path(path, self.exempt_prefixes)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self.is_exempt(request.url.path):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if not auth_header or not auth_header.startswith(BEARER_PREFIX):
            return await call_next(request)

        token = auth_header[len(BEARER_PREFIX):].strip()
        try:
            username = extract_username(token, self.settings)
        except InvalidTokenError as e:
            logger.info("Rejected bearer token on %s: %s", request.url.path, e)
            return unauthorized_response(INVALID_TOKEN_MESSAGE)

        security = get_security_context(request)
        if not security.is_authenticated:
            details = await run_in_threadpool(self.load_user_details, username)
            if details is None or not is_token_valid(token, details.username, self.settings):
                logger.info("Rejected bearer token for '%s' on %s", username, request.url.path)
                return unauthorized_response(INVALID_OR_EXPIRED_TOKEN_MESSAGE)
            security.authenticate(details.to_identity())

        return await call_next(request)

    def load_user_details(self, username: str) -> UserDetails | None:
        with self.session_factory() as session:
            try:
                return UserDetailsService(UserRepository(session)).load_user_by_username(username)
            except UserNotFoundError:
                return None


class AuthorizationGuardMiddleware(BaseHTTPMiddleware):
    """Answer 401 for any non-public request that reaches routing without an identity."""

    def __init__(
        self,
        app: ASGIApp,
        public_prefixes: tuple[str, ...] = DEFAULT_PUBLIC_PREFIXES,
    ) -> None:
        super().__init__(app)
        self.public_prefixes = public_prefixes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if is_public_path(request.url.path, self.public_prefixes):
            return await call_next(request)
        if not get_security_context(request).is_authenticated:
            logger.debug("No identity for %s %s", request.method, request.url.path)
            return unauthorized_response(UNAUTHORIZED_MESSAGE)
        return await call_next(request)
