"""Schemas for user profile responses and admin user updates."""

import uuid
from datetime import datetime

from app.models.user import UserRole
from app.schemas.common import CamelModel, RequestModel


class UserSummary(CamelModel):
    """Compact user reference embedded in other resources."""

    id: uuid.UUID
    username: str
    role: UserRole


class UserResponse(UserSummary):
    """User profile (never includes the password hash)."""

    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class UpdateRoleRequest(RequestModel):
    role: UserRole


class UpdateUserStatusRequest(RequestModel):
    is_active: bool
