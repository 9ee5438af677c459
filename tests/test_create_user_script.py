"""Tests for bookreviewhub.scripts.create_user: privileged accounts share the registration rules."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import IntegrityError

from bookreviewhub.core import security
from bookreviewhub.core.config import settings
from bookreviewhub.core.exceptions import EmailTakenError, InvalidArgumentError, UsernameTakenError
from bookreviewhub.core.security import verify_password
from bookreviewhub.models import Role, Status, User
from bookreviewhub.repositories import UserRepository
from bookreviewhub.scripts.create_user import create_user
from support import TEST_BCRYPT_ROUNDS, build_test_app


class CreateUserTestCase(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.object(security, "BCRYPT_ROUNDS", TEST_BCRYPT_ROUNDS)
        patcher.start()
        self.addCleanup(patcher.stop)


class TestCreateUser(CreateUserTestCase):
    def setUp(self) -> None:
        super().setUp()
        _, self.session_factory = build_test_app()

    def _create(self, username: str = "root", email: str = "root@x.com", role: Role = Role.ADMIN) -> User:
        with self.session_factory() as db:
            return create_user(
                UserRepository(db), username, "s3cret", email, "R", "T", role=role, settings=settings
            )

    def test_creates_active_user_with_role_and_hash(self) -> None:
        self._create(role=Role.MODERATOR)
        with self.session_factory() as db:
            user = db.query(User).filter(User.username == "root").one()
            self.assertEqual(user.role, Role.MODERATOR)
            self.assertEqual(user.status, Status.ACTIVE)
            self.assertTrue(verify_password("s3cret", user.hashed_password))

    def test_taken_username_raises_username_taken(self) -> None:
        self._create()
        with self.assertRaises(UsernameTakenError) as ctx:
            self._create(email="other@x.com")
        self.assertEqual(str(ctx.exception), "Username is already taken")

    def test_taken_email_raises_email_taken(self) -> None:
        self._create()
        with self.assertRaises(EmailTakenError) as ctx:
            self._create(username="other")
        self.assertEqual(str(ctx.exception), "Email is already registered")

    def test_blank_username_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self._create(username="   ")


class TestCreateUserRace(CreateUserTestCase):
    """A unique-constraint failure after the checks is reported as the matching taken error."""

    def test_lost_race_on_username(self) -> None:
        users = MagicMock()
        users.exists_by_username.side_effect = [False, True]
        users.exists_by_email.return_value = False
        users.save.side_effect = IntegrityError("INSERT", {}, Exception("unique"))
        with self.assertRaises(UsernameTakenError):
            create_user(users, "root", "s3cret", "root@x.com", "R", "T", settings=settings)

    def test_lost_race_on_email(self) -> None:
        users = MagicMock()
        users.exists_by_username.return_value = False
        users.exists_by_email.side_effect = [False, True]
        users.save.side_effect = IntegrityError("INSERT", {}, Exception("unique"))
        with self.assertRaises(EmailTakenError):
            create_user(users, "root", "s3cret", "root@x.com", "R", "T", settings=settings)


if __name__ == "__main__":
    unittest.main()
