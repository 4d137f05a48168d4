"""Unit tests for app.services.authentication: bearer parsing, guard, and signin."""

import unittest
import uuid
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from app.core.errors import Unauthorized
from app.core.security import TokenService, hash_password
from app.models import UserRole
from app.schemas.auth import Principal
from app.services.authentication import authenticate, parse_bearer, sign_in

SECRET = "guard-test-secret-0123456789abcdef0123456789abcdef"


def _user(role: UserRole = UserRole.WORKER, is_active: bool = True, password: str = "WorkerPass123!"):
    return SimpleNamespace(
        id=uuid.uuid4(),
        username="worker_user",
        role=role,
        is_active=is_active,
        password_hash=hash_password(password),
        last_login_at=None,
    )


def _db_returning(user) -> MagicMock:
    db = MagicMock()
    db.get.return_value = user
    db.query.return_value.filter.return_value.first.return_value = user
    return db


class TestParseBearer(unittest.TestCase):
    """Only an exact 'Bearer <token>' header is accepted."""

    def test_valid(self) -> None:
        self.assertEqual(parse_bearer("Bearer abc.def.ghi"), "abc.def.ghi")

    def test_rejected_headers(self) -> None:
        for header in (
            None,
            "",
            "Bearer",
            "Bearer ",
            "bearer abc.def.ghi",
            "BEARER abc.def.ghi",
            "InvalidScheme token",
            "Basic dXNlcjpwYXNz",
            "Bearer  abc.def.ghi",
            "Bearer abc def",
            "abc.def.ghi",
        ):
            with self.subTest(header=header):
                with self.assertRaises(Unauthorized):
                    parse_bearer(header)


class TestAuthenticate(unittest.TestCase):
    """authenticate() verifies the token, then trusts only the current user record."""

    def setUp(self) -> None:
        self.tokens = TokenService(SECRET)

    def _header_for(self, user, role: UserRole | None = None, now: datetime | None = None) -> str:
        principal = Principal(id=user.id, username=user.username, role=role or user.role)
        return f"Bearer {self.tokens.issue(principal, now=now)}"

    def test_valid_token(self) -> None:
        user = _user()
        db = _db_returning(user)
        principal = authenticate(self._header_for(user), self.tokens, db)
        self.assertEqual(principal.id, user.id)
        self.assertEqual(principal.role, UserRole.WORKER)
        db.get.assert_called_once()
        db.commit.assert_not_called()

    def test_current_role_wins_over_token_role(self) -> None:
        user = _user(role=UserRole.ADMIN)
        db = _db_returning(user)
        header = self._header_for(user, role=UserRole.WORKER)
        principal = authenticate(header, self.tokens, db)
        self.assertEqual(principal.role, UserRole.ADMIN)

    def test_demotion_takes_effect(self) -> None:
        user = _user(role=UserRole.WORKER)
        db = _db_returning(user)
        header = self._header_for(user, role=UserRole.ADMIN)
        self.assertEqual(authenticate(header, self.tokens, db).role, UserRole.WORKER)

    def test_invalid_token(self) -> None:
        with self.assertRaises(Unauthorized):
            authenticate("Bearer invalid-token", self.tokens, MagicMock())

    def test_expired_token(self) -> None:
        user = _user()
        header = self._header_for(user, now=datetime.now(UTC) - timedelta(hours=1, seconds=5))
        db = _db_returning(user)
        with self.assertRaises(Unauthorized):
            authenticate(header, self.tokens, db)
        db.get.assert_not_called()

    def test_foreign_key_token(self) -> None:
        user = _user()
        other = TokenService("other-secret-0123456789abcdef0123456789abcdef")
        token = other.issue(Principal(id=user.id, username=user.username, role=user.role))
        with self.assertRaises(Unauthorized):
            authenticate(f"Bearer {token}", self.tokens, _db_returning(user))

    def test_deleted_user(self) -> None:
        user = _user()
        with self.assertRaises(Unauthorized):
            authenticate(self._header_for(user), self.tokens, _db_returning(None))

    def test_inactive_user(self) -> None:
        user = _user(is_active=False)
        with self.assertRaises(Unauthorized):
            authenticate(self._header_for(user), self.tokens, _db_returning(user))

    def test_missing_header_skips_store(self) -> None:
        db = MagicMock()
        with self.assertRaises(Unauthorized):
            authenticate(None, self.tokens, db)
        db.get.assert_not_called()


class TestSignIn(unittest.TestCase):
    """sign_in() issues a token only for valid credentials of an active user."""

    def setUp(self) -> None:
        self.tokens = TokenService(SECRET)

    def test_success_issues_token_and_records_login(self) -> None:
        user = _user(role=UserRole.ADMIN, password="AdminPass123!")
        db = _db_returning(user)
        token = sign_in(db, self.tokens, "worker_user", "AdminPass123!")
        principal = self.tokens.verify(token)
        self.assertEqual(principal.id, user.id)
        self.assertEqual(principal.role, UserRole.ADMIN)
        self.assertIsNotNone(user.last_login_at)
        db.commit.assert_called_once()

    def test_wrong_password(self) -> None:
        db = _db_returning(_user())
        with self.assertRaises(Unauthorized) as ctx:
            sign_in(db, self.tokens, "worker_user", "WrongPassword123!")
        self.assertEqual(ctx.exception.message, "Invalid username or password")
        db.commit.assert_not_called()

    def test_unknown_user(self) -> None:
        db = _db_returning(None)
        with patch("app.services.authentication.verify_password") as verify:
            with self.assertRaises(Unauthorized):
                sign_in(db, self.tokens, "nonexistent_user", "SomePassword123!")
            verify.assert_not_called()

    def test_inactive_user_same_message(self) -> None:
        db = _db_returning(_user(is_active=False))
        with self.assertRaises(Unauthorized) as ctx:
            sign_in(db, self.tokens, "worker_user", "WorkerPass123!")
        self.assertEqual(ctx.exception.message, "Invalid username or password")


if __name__ == "__main__":
    unittest.main()
