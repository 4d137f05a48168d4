"""Password hashing and JWT issuance/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.auth import Principal

# Every access token expires exactly this long after it was issued.
ACCESS_TOKEN_TTL = timedelta(hours=1)

REQUIRED_CLAIMS = ("sub", "username", "role", "iat", "exp")

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenError(Exception):
    """Base class for bearer token verification failures."""


class MalformedToken(TokenError):
    """Token cannot be parsed or does not carry the expected claims."""


class InvalidSignature(TokenError):
    """Token signature does not match the server key."""


class TokenExpired(TokenError):
    """Token is past its expiry time."""


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    Holds only read-only key material, so one instance can be shared by all
    requests. Verification trusts the embedded claims as of issuance; callers
    that need the current role must re-read the user record.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = ACCESS_TOKEN_TTL,
    ) -> None:
        if not secret:
            raise ValueError("Token secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, principal: Principal, now: datetime | None = None) -> str:
        """Create a token embedding sub (user id), username, role, iat and exp."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(principal.id),
            "username": principal.username,
            "role": principal.role.value,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str, now: datetime | None = None) -> Principal:
        """
        Check signature and expiry and return the principal the token was issued for.

        Raises InvalidSignature, TokenExpired or MalformedToken. Expiry wins over a
        bad signature or a foreign algorithm: an elapsed token always reports
        TokenExpired, unless its payload cannot be decoded at all.
        """
        current = now or datetime.now(UTC)
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except jwt.PyJWTError as e:
            # Any rejected token whose payload still decodes reports expiry first.
            if _is_expired(_unverified_claims(token), current):
                raise TokenExpired("Token has expired") from e
            if isinstance(e, jwt.InvalidSignatureError):
                raise InvalidSignature("Token signature is invalid") from e
            raise MalformedToken("Token could not be parsed") from e

        if not isinstance(claims["exp"], (int, float)):
            raise MalformedToken("Token expiry is not a timestamp")
        if _is_expired(claims, current):
            raise TokenExpired("Token has expired")
        try:
            return Principal(
                id=uuid.UUID(str(claims["sub"])),
                username=claims["username"],
                role=claims["role"],
            )
        except (ValueError, ValidationError) as e:
            raise MalformedToken("Token claims are invalid") from e


def _unverified_claims(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return {}


def _is_expired(claims: dict[str, Any], now: datetime) -> bool:
    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return False
    return now.timestamp() >= exp


@lru_cache
def get_token_service() -> TokenService:
    """Return the process-wide token service built from settings (FastAPI dependency)."""
    return TokenService(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )
