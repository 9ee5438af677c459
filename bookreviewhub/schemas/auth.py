"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class RegisterRequest(BaseModel):
    """New account details. JSON keys are camelCase (firstName, middleName, lastName)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    email: str = Field(
        ..., min_length=3, max_length=255, pattern=EMAIL_PATTERN, description="Email address"
    )
    first_name: str = Field(..., min_length=1, max_length=255)
    middle_name: str | None = Field(default=None, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenData(BaseModel):
    """JWT issued after successful login. Send it as: Authorization: Bearer <token>"""

    token: str = Field(..., description="JWT access token")
