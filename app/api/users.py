"""User endpoints: own profile, admin listing, lookup, role and status updates."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import CurrentUser, DbSession, enforce, require
from app.schemas.auth import Principal
from app.schemas.common import Envelope
from app.schemas.users import UpdateRoleRequest, UpdateUserStatusRequest, UserResponse
from app.services import users as user_service
from app.services.authorization import Operation

router = APIRouter()


@router.get("/me", response_model=Envelope[UserResponse])
def get_me(
    principal: Annotated[Principal, Depends(require(Operation.VIEW_PROFILE))],
    db: DbSession,
) -> Envelope[UserResponse]:
    """Return the caller's own profile."""
    user = user_service.require_user(db, principal.id)
    return Envelope[UserResponse](data=UserResponse.model_validate(user))


@router.get("", response_model=Envelope[list[UserResponse]])
def list_users(
    _admin: Annotated[Principal, Depends(require(Operation.LIST_USERS))],
    db: DbSession,
) -> Envelope[list[UserResponse]]:
    """List all users (admin only)."""
    users = user_service.list_users(db)
    return Envelope[list[UserResponse]](data=[UserResponse.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=Envelope[UserResponse])
def get_user(user_id: uuid.UUID, principal: CurrentUser, db: DbSession) -> Envelope[UserResponse]:
    """Return one user. Admins may view anyone; other users only themselves."""
    enforce(principal, Operation.VIEW_USER, user_id)
    user = user_service.require_user(db, user_id)
    return Envelope[UserResponse](data=UserResponse.model_validate(user))


@router.patch("/{user_id}/role", response_model=Envelope[UserResponse])
def update_user_role(
    user_id: uuid.UUID,
    body: UpdateRoleRequest,
    _admin: Annotated[Principal, Depends(require(Operation.UPDATE_USER_ROLE))],
    db: DbSession,
) -> Envelope[UserResponse]:
    """Change a user's role (admin only). Takes effect on the user's next request."""
    user = user_service.update_role(db, user_id, body.role)
    return Envelope[UserResponse](data=UserResponse.model_validate(user))


@router.patch("/{user_id}/status", response_model=Envelope[UserResponse])
def update_user_status(
    user_id: uuid.UUID,
    body: UpdateUserStatusRequest,
    _admin: Annotated[Principal, Depends(require(Operation.UPDATE_USER_STATUS))],
    db: DbSession,
) -> Envelope[UserResponse]:
    """Activate or deactivate a user (admin only). Inactive users cannot sign in or use tokens."""
    user = user_service.set_active(db, user_id, body.is_active)
    return Envelope[UserResponse](data=UserResponse.model_validate(user))
