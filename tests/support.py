"""Shared helpers for tests: an app wired to a private in-memory SQLite database."""

from typing import Any

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from bookreviewhub.core.config import Settings
from bookreviewhub.core.database import make_engine
from bookreviewhub.main import create_app
from bookreviewhub.models import Base

# Cheap bcrypt cost for tests; patch bookreviewhub.core.security.BCRYPT_ROUNDS with it.
TEST_BCRYPT_ROUNDS = 4


def build_test_app(**settings_overrides: Any) -> tuple[FastAPI, sessionmaker]:
    """Create a fresh app and schema; returns (app, session_factory)."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    settings = Settings(_env_file=None, DATABASE_URL="sqlite://", **settings_overrides)
    app = create_app(settings=settings, session_factory=session_factory)
    return app, session_factory


def register_payload(**overrides: Any) -> dict[str, Any]:
    """Registration body for alice; override any key."""
    payload: dict[str, Any] = {
        "username": "alice",
        "password": "p@ss",
        "email": "a@x.com",
        "firstName": "A",
        "lastName": "L",
    }
    payload.update(overrides)
    return payload


def bearer_headers(client: TestClient, username: str = "alice", password: str = "p@ss") -> dict[str, str]:
    """Register (if needed) and log in; returns an Authorization header for the token."""
    client.post(
        "/api/auth/register",
        json=register_payload(username=username, password=password, email=f"{username}@x.com"),
    )
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}
