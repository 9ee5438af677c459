"""Pydantic request/response schemas."""

from bookreviewhub.schemas.auth import LoginRequest, RegisterRequest, TokenData
from bookreviewhub.schemas.book import BookItem
from bookreviewhub.schemas.health import HealthResponse
from bookreviewhub.schemas.response import ErrorResponse, SuccessResponse
from bookreviewhub.schemas.user import UserProfile

__all__ = [
    "BookItem",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "SuccessResponse",
    "TokenData",
    "UserProfile",
]
