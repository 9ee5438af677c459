"""User profile endpoints (bearer token required)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookreviewhub.api.deps import get_user_repository, require_authenticated, require_roles
from bookreviewhub.core.context import IdentityContext
from bookreviewhub.core.exceptions import AuthenticationRequiredError
from bookreviewhub.models.user import Role
from bookreviewhub.repositories.user_repository import UserRepository
from bookreviewhub.schemas.response import SuccessResponse
from bookreviewhub.schemas.user import UserProfile

router = APIRouter()


@router.get("/me", response_model=SuccessResponse[UserProfile])
def get_me(
    identity: Annotated[IdentityContext, Depends(require_authenticated)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> SuccessResponse[UserProfile]:
    """Profile of the authenticated caller."""
    user = users.find_by_username(identity.username)
    if user is None:
        raise AuthenticationRequiredError()
    return SuccessResponse[UserProfile](
        status=200,
        message="OK",
        data=UserProfile.model_validate(user),
    )


@router.get("", response_model=SuccessResponse[list[UserProfile]])
def list_users(
    _staff: Annotated[IdentityContext, Depends(require_roles(Role.MODERATOR, Role.ADMIN))],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> SuccessResponse[list[UserProfile]]:
    """List all users (moderators and admins only)."""
    return SuccessResponse[list[UserProfile]](
        status=200,
        message="OK",
        data=[UserProfile.model_validate(u) for u in users.list_all()],
    )
