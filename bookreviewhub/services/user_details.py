"""Load the security view of a user (credentials and authority) by username."""

from dataclasses import dataclass

from bookreviewhub.core.context import IdentityContext, authority_for
from bookreviewhub.core.exceptions import UserNotFoundError
from bookreviewhub.models.user import Role, Status
from bookreviewhub.repositories.user_repository import UserRepository


@dataclass(frozen=True)
class UserDetails:
    """Credentials and authority of a stored user."""

    user_id: int
    username: str
    password_hash: str
    role: Role
    status: Status

    @property
    def authorities(self) -> tuple[str, ...]:
        return (authority_for(self.role),)

    def to_identity(self) -> IdentityContext:
        return IdentityContext(user_id=self.user_id, username=self.username, role=self.role)


class UserDetailsService:
    def __init__(self, users: UserRepository):
        self.users = users

    def load_user_by_username(self, username: str) -> UserDetails:
        """Raises UserNotFoundError if no user has this username."""
        user = self.users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return UserDetails(
            user_id=user.id,
            username=user.username,
            password_hash=user.hashed_password,
            role=user.role,
            status=user.status,
        )
