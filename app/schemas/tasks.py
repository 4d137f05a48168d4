"""Schemas for task endpoints."""

import uuid
from datetime import datetime

from pydantic import Field

from app.models.task import TaskStatus
from app.schemas.common import CamelModel, RequestModel
from app.schemas.users import UserSummary


class CreateTaskRequest(RequestModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)


class AssignTaskRequest(RequestModel):
    """Target user for assignment; must be a UUID."""

    user_id: uuid.UUID


class UpdateTaskStatusRequest(RequestModel):
    status: TaskStatus


class TaskResponse(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    status: TaskStatus
    assignee: UserSummary | None = None
    created_by_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
