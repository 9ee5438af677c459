"""Registration and login endpoints (public; exempt from bearer token verification)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookreviewhub.api.deps import get_auth_service, get_security_context
from bookreviewhub.core.context import SecurityContext
from bookreviewhub.schemas.auth import LoginRequest, RegisterRequest, TokenData
from bookreviewhub.schemas.response import SuccessResponse
from bookreviewhub.services.auth_service import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=SuccessResponse[None],
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> SuccessResponse[None]:
    """Create an account with role USER. 400 if the username or email is already taken."""
    return auth_service.register(body)


@router.post("/login", response_model=SuccessResponse[TokenData])
def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    security: Annotated[SecurityContext, Depends(get_security_context)],
) -> SuccessResponse[TokenData]:
    """
    Authenticate with username and password; returns a JWT under data.token.
    Include the token in the Authorization header as: Bearer <token>
    """
    return auth_service.login(body, security)
