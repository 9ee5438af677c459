"""Envelope schemas shared by every endpoint: success payloads and structured errors."""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(UTC)


class SuccessResponse(BaseModel, Generic[T]):
    """Acknowledgement with HTTP status, message and optional data."""

    timestamp: datetime = Field(default_factory=_now, description="Response time (UTC)")
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable message")
    data: T | None = Field(default=None, description="Payload; null when there is none")


class ErrorResponse(BaseModel):
    """Structured error body produced by the error translation layer."""

    timestamp: datetime = Field(default_factory=_now, description="Error time (UTC)")
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="Short error label (HTTP reason phrase)")
    message: str = Field(..., description="Human-readable message")
    path: str = Field(..., description="Request path")
