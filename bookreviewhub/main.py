"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from collections.abc import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from bookreviewhub.api import router as api_router
from bookreviewhub.api.errors import register_exception_handlers
from bookreviewhub.api.middleware import (
    AuthorizationGuardMiddleware,
    JwtAuthenticationMiddleware,
    public_prefixes_for,
)
from bookreviewhub.core.config import Settings, get_settings
from bookreviewhub.core.database import SessionLocal
from bookreviewhub.core.logging_config import configure_logging


def create_app(
    settings: Settings | None = None,
    session_factory: Callable[[], Session] | None = None,
) -> FastAPI:
    """Build the app; tests pass their own settings and session factory."""
    settings = settings or get_settings()
    session_factory = session_factory or SessionLocal
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="BookReviewHub API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.session_factory = session_factory

    public_prefixes = public_prefixes_for(settings.API_PREFIX)
    # Starlette runs the last-added middleware first: CORS, then token
    # verification, then the default-deny guard, then routing.
    app.add_middleware(AuthorizationGuardMiddleware, public_prefixes=public_prefixes)
    app.add_middleware(
        JwtAuthenticationMiddleware,
        session_factory=session_factory,
        settings=settings,
        exempt_prefixes=public_prefixes,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CORS_ALLOWED_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
