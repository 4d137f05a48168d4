"""Request/response schemas for auth endpoints and the authenticated principal."""

import re
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.user import UserRole
from app.schemas.common import CamelModel, RequestModel

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"


class Principal(BaseModel):
    """Authenticated identity (id, username, role) attached to a request."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: uuid.UUID
    username: str
    role: UserRole


class SignUpRequest(RequestModel):
    """Credentials and requested role for a new account."""

    username: str = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        pattern=USERNAME_PATTERN,
        description="Letters, digits, '_', '.', '-'",
    )
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: UserRole = Field(default=UserRole.WORKER)

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        if not re.search(r"[A-Z]", v) or not re.search(r"[a-z]", v):
            raise ValueError("Password must contain upper-case and lower-case letters")
        if not re.search(r"[\d\W_]", v):
            raise ValueError("Password must contain a digit or a symbol")
        return v


class SignInRequest(RequestModel):
    """Credentials for signin."""

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class TokenResponse(CamelModel):
    """JWT access token returned after successful signin."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
