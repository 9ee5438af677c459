"""Registration and login flows."""

import logging
from datetime import UTC, datetime
from functools import lru_cache

from sqlalchemy.exc import IntegrityError

from bookreviewhub.core.config import Settings
from bookreviewhub.core.context import SecurityContext
from bookreviewhub.core.exceptions import (
    BadCredentialsError,
    EmailTakenError,
    UserNotFoundError,
    UsernameTakenError,
)
from bookreviewhub.core.security import create_access_token, hash_password, verify_password
from bookreviewhub.models.user import Role, Status, User
from bookreviewhub.repositories.user_repository import UserRepository
from bookreviewhub.schemas.auth import LoginRequest, RegisterRequest, TokenData
from bookreviewhub.schemas.response import SuccessResponse
from bookreviewhub.services.user_details import UserDetails, UserDetailsService

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_password_hash() -> str:
    """Hash checked for unknown usernames so they cost the same bcrypt work as known ones."""
    return hash_password("dummy-password-for-unknown-users")


class AuthenticationManager:
    """Matches a username/password pair against the stored bcrypt hash."""

    def __init__(self, user_details: UserDetailsService):
        self.user_details = user_details

    def authenticate(self, username: str, password: str) -> UserDetails:
        """
        Return the matching user's details.
        Raises BadCredentialsError for an unknown user or a wrong password alike.
        """
        try:
            details = self.user_details.load_user_by_username(username)
        except UserNotFoundError:
            verify_password(password, _dummy_password_hash())
            raise BadCredentialsError() from None
        if not verify_password(password, details.password_hash):
            raise BadCredentialsError()
        return details


class AuthService:
    """Registration and login over the credential store."""

    def __init__(
        self,
        users: UserRepository,
        authentication_manager: AuthenticationManager,
        settings: Settings,
    ):
        self.users = users
        self.authentication_manager = authentication_manager
        self.settings = settings

    def create_user(
        self,
        username: str,
        password: str,
        email: str,
        first_name: str,
        last_name: str,
        middle_name: str | None = None,
        role: Role = Role.USER,
    ) -> User:
        """
        Persist an ACTIVE user with a hashed password.
        Raises UsernameTakenError or EmailTakenError when either key is already in use.
        """
        if self.users.exists_by_username(username):
            logger.info("Account creation rejected: username '%s' is taken", username)
            raise UsernameTakenError(username)
        if self.users.exists_by_email(email):
            logger.info("Account creation rejected: email for '%s' is taken", username)
            raise EmailTakenError(email)

        user = User(
            username=username,
            hashed_password=hash_password(password),
            email=email,
            role=role,
            status=Status.ACTIVE,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
        )
        try:
            self.users.save(user)
        except IntegrityError as e:
            # A concurrent insert won the unique constraint after our checks.
            if self.users.exists_by_username(username):
                raise UsernameTakenError(username) from e
            if self.users.exists_by_email(email):
                raise EmailTakenError(email) from e
            raise
        return user

    def register(self, body: RegisterRequest) -> SuccessResponse[None]:
        """Create a USER/ACTIVE account; see create_user for the uniqueness rules."""
        user = self.create_user(
            body.username,
            body.password,
            body.email,
            body.first_name,
            body.last_name,
            middle_name=body.middle_name,
            role=Role.USER,
        )
        logger.info("Registered user '%s' (id=%s)", user.username, user.id)
        return SuccessResponse[None](
            status=201,
            message="User registered successfully!",
            data=None,
        )

    def login(self, body: LoginRequest, security: SecurityContext) -> SuccessResponse[TokenData]:
        """
        Authenticate, record the login time, establish the identity on security and issue a JWT.
        Raises BadCredentialsError on any credential mismatch.
        """
        try:
            details = self.authentication_manager.authenticate(body.username, body.password)
        except BadCredentialsError:
            logger.warning("Login failed for username '%s'", body.username)
            raise

        if details.status != Status.ACTIVE:
            logger.warning("User '%s' logged in with status %s", details.username, details.status.value)

        self.users.record_login(details.user_id, datetime.now(UTC))
        security.authenticate(details.to_identity())
        token = create_access_token(details.username, details.role.value, self.settings)

        logger.info("User '%s' logged in", details.username)
        return SuccessResponse[TokenData](
            status=200,
            message="Login successful!",
            data=TokenData(token=token),
        )
