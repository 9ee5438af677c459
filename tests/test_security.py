"""Unit tests for bookreviewhub.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt

from bookreviewhub.core import security
from bookreviewhub.core.config import Settings, settings
from bookreviewhub.core.exceptions import InvalidTokenError
from bookreviewhub.core.security import (
    create_access_token,
    decode_access_token,
    extract_username,
    hash_password,
    is_token_valid,
    verify_password,
)
from support import TEST_BCRYPT_ROUNDS


class TestPasswordHashing(unittest.TestCase):
    """hash_password stores a salted one-way hash; verify_password checks it."""

    def setUp(self) -> None:
        patcher = patch.object(security, "BCRYPT_ROUNDS", TEST_BCRYPT_ROUNDS)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("p@ss")
        self.assertNotEqual(hashed, "p@ss")
        self.assertNotIn("p@ss", hashed)
        self.assertTrue(hashed.startswith("$2"))

    def test_verify_accepts_original_password(self) -> None:
        hashed = hash_password("p@ss")
        self.assertTrue(verify_password("p@ss", hashed))

    def test_verify_rejects_other_password(self) -> None:
        hashed = hash_password("p@ss")
        self.assertFalse(verify_password("p@sS", hashed))
        self.assertFalse(verify_password("", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("p@ss"), hash_password("p@ss"))

    def test_verify_against_garbage_hash_is_false(self) -> None:
        self.assertFalse(verify_password("p@ss", "not-a-bcrypt-hash"))

    def test_password_longer_than_72_bytes_is_accepted(self) -> None:
        long_password = "x" * 100
        hashed = hash_password(long_password)
        self.assertTrue(verify_password(long_password, hashed))


class TestAccessToken(unittest.TestCase):
    """create_access_token encodes the username; decoding checks signature and expiry."""

    def test_round_trip_carries_username_and_role(self) -> None:
        token = create_access_token("alice", "USER", settings)
        payload = decode_access_token(token, settings)
        self.assertEqual(payload["sub"], "alice")
        self.assertEqual(payload["role"], "USER")
        self.assertIn("exp", payload)
        self.assertIn("iat", payload)

    def test_expiry_follows_settings(self) -> None:
        before = datetime.now(UTC)
        payload = decode_access_token(create_access_token("alice", "USER", settings), settings)
        expected = before + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
        self.assertAlmostEqual(payload["exp"], expected.timestamp(), delta=5)

    def test_expired_token_is_rejected(self) -> None:
        token = create_access_token("alice", "USER", settings, expires_delta=timedelta(seconds=-10))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token, settings)
        with self.assertRaises(InvalidTokenError):
            extract_username(token, settings)
        self.assertFalse(is_token_valid(token, "alice", settings))

    def test_token_signed_with_other_secret_is_rejected(self) -> None:
        forged = jwt.encode(
            {"sub": "alice", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            "some-other-secret",
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidTokenError):
            extract_username(forged, settings)
        self.assertFalse(is_token_valid(forged, "alice", settings))

    def test_malformed_token_is_rejected(self) -> None:
        with self.assertRaises(InvalidTokenError):
            extract_username("not.a.jwt", settings)

    def test_token_without_subject_is_rejected(self) -> None:
        token = jwt.encode(
            {"exp": datetime.now(UTC) + timedelta(minutes=5)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidTokenError):
            extract_username(token, settings)

    def test_extract_username(self) -> None:
        self.assertEqual(extract_username(create_access_token("bob", "ADMIN", settings), settings), "bob")

    def test_is_token_valid_requires_matching_subject(self) -> None:
        token = create_access_token("alice", "USER", settings)
        self.assertTrue(is_token_valid(token, "alice", settings))
        self.assertFalse(is_token_valid(token, "mallory", settings))


class TestAccessTokenWithExplicitSettings(unittest.TestCase):
    """Signing key and lifetime come from the Settings passed in, not from the module default."""

    def setUp(self) -> None:
        self.custom = Settings(
            _env_file=None,
            DATABASE_URL="sqlite://",
            JWT_SECRET="custom-signing-secret",
            JWT_EXPIRE_MINUTES=5,
        )

    def test_lifetime_follows_passed_settings(self) -> None:
        payload = decode_access_token(create_access_token("alice", "USER", self.custom), self.custom)
        self.assertEqual(payload["exp"] - payload["iat"], 5 * 60)

    def test_token_verifies_only_under_its_own_secret(self) -> None:
        token = create_access_token("alice", "USER", self.custom)
        self.assertEqual(extract_username(token, self.custom), "alice")
        other = Settings(_env_file=None, DATABASE_URL="sqlite://", JWT_SECRET="other-secret")
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, other)
        self.assertFalse(is_token_valid(token, "alice", other))


if __name__ == "__main__":
    unittest.main()
