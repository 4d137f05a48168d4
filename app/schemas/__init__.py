"""Pydantic request/response schemas."""

from app.schemas.auth import Principal, SignInRequest, SignUpRequest, TokenResponse
from app.schemas.common import Envelope, ErrorEnvelope
from app.schemas.health import HealthResponse
from app.schemas.tasks import (
    AssignTaskRequest,
    CreateTaskRequest,
    TaskResponse,
    UpdateTaskStatusRequest,
)
from app.schemas.users import (
    UpdateRoleRequest,
    UpdateUserStatusRequest,
    UserResponse,
    UserSummary,
)

__all__ = [
    "AssignTaskRequest",
    "CreateTaskRequest",
    "Envelope",
    "ErrorEnvelope",
    "HealthResponse",
    "Principal",
    "SignInRequest",
    "SignUpRequest",
    "TaskResponse",
    "TokenResponse",
    "UpdateRoleRequest",
    "UpdateTaskStatusRequest",
    "UpdateUserStatusRequest",
    "UserResponse",
    "UserSummary",
]
