"""
Create a user with any role (registration only ever creates USER). Run from project root:
  python -m bookreviewhub.scripts.create_user USERNAME PASSWORD EMAIL FIRST_NAME LAST_NAME [--middle-name M] [--role ROLE]
Example:
  python -m bookreviewhub.scripts.create_user admin your-secure-password admin@example.com Ada Admin --role ADMIN
"""
import argparse
import logging
import sys

from bookreviewhub.core.config import Settings, get_settings
from bookreviewhub.core.database import SessionLocal
from bookreviewhub.core.exceptions import InvalidArgumentError
from bookreviewhub.core.logging_config import configure_logging
from bookreviewhub.models.user import Role, User
from bookreviewhub.repositories.user_repository import UserRepository
from bookreviewhub.services.auth_service import AuthenticationManager, AuthService
from bookreviewhub.services.user_details import UserDetailsService

logger = logging.getLogger(__name__)


def create_user(
    users: UserRepository,
    username: str,
    password: str,
    email: str,
    first_name: str,
    last_name: str,
    middle_name: str | None = None,
    role: Role = Role.USER,
    settings: Settings | None = None,
) -> User:
    """
    Persist an ACTIVE user through AuthService.create_user.
    Raises InvalidArgumentError on bad input, UsernameTakenError or EmailTakenError on a taken key.
    """
    username = username.strip()
    if not username or len(username) > 255:
        raise InvalidArgumentError("Invalid username length.")
    if not password or len(password) > 128:
        raise InvalidArgumentError("Password must be 1-128 characters.")
    service = AuthService(
        users,
        AuthenticationManager(UserDetailsService(users)),
        settings or get_settings(),
    )
    return service.create_user(
        username,
        password,
        email,
        first_name,
        last_name,
        middle_name=middle_name,
        role=role,
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a BookReviewHub user with a chosen role.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument("--middle-name", default=None)
    parser.add_argument("--role", default=Role.USER.value, choices=[r.value for r in Role])
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        user = create_user(
            UserRepository(db),
            args.username,
            args.password,
            args.email,
            args.first_name,
            args.last_name,
            middle_name=args.middle_name,
            role=Role(args.role),
            settings=settings,
        )
    except InvalidArgumentError as e:
        # Covers UsernameTakenError and EmailTakenError.
        print(str(e), file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' with role '%s'", user.username, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
