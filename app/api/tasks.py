"""Task endpoints. Admins manage tasks; workers see and progress only their own."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import CurrentUser, DbSession, enforce, require
from app.schemas.auth import Principal
from app.schemas.common import Envelope
from app.schemas.tasks import (
    AssignTaskRequest,
    CreateTaskRequest,
    TaskResponse,
    UpdateTaskStatusRequest,
)
from app.services import tasks as task_service
from app.services.authorization import Operation, scope_to_self

router = APIRouter()


@router.get("", response_model=Envelope[list[TaskResponse]])
def list_tasks(
    principal: Annotated[Principal, Depends(require(Operation.LIST_TASKS))],
    db: DbSession,
) -> Envelope[list[TaskResponse]]:
    """List tasks. Admins see all tasks; workers see only tasks assigned to them."""
    assignee_id = principal.id if scope_to_self(principal) else None
    tasks = task_service.list_tasks(db, assignee_id=assignee_id)
    return Envelope[list[TaskResponse]](data=[TaskResponse.model_validate(t) for t in tasks])


@router.post(
    "",
    response_model=Envelope[TaskResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    body: CreateTaskRequest,
    principal: Annotated[Principal, Depends(require(Operation.CREATE_TASK))],
    db: DbSession,
) -> Envelope[TaskResponse]:
    """Create a task in status OPEN (admin only)."""
    task = task_service.create_task(db, principal, body.title, body.description)
    return Envelope[TaskResponse](
        status_code=status.HTTP_201_CREATED,
        data=TaskResponse.model_validate(task),
    )


@router.get("/{task_id}", response_model=Envelope[TaskResponse])
def get_task(task_id: uuid.UUID, principal: CurrentUser, db: DbSession) -> Envelope[TaskResponse]:
    """Return one task to an admin or to its assignee."""
    task = task_service.require_task(db, task_id)
    enforce(principal, Operation.VIEW_TASK, task.assignee_id)
    return Envelope[TaskResponse](data=TaskResponse.model_validate(task))


@router.patch("/{task_id}/assign", response_model=Envelope[TaskResponse])
def assign_task(
    task_id: uuid.UUID,
    body: AssignTaskRequest,
    _admin: Annotated[Principal, Depends(require(Operation.ASSIGN_TASK))],
    db: DbSession,
) -> Envelope[TaskResponse]:
    """Assign a task to a user (admin only)."""
    task = task_service.assign_task(db, task_id, body.user_id)
    return Envelope[TaskResponse](data=TaskResponse.model_validate(task))


@router.patch("/{task_id}/status", response_model=Envelope[TaskResponse])
def update_task_status(
    task_id: uuid.UUID,
    body: UpdateTaskStatusRequest,
    principal: CurrentUser,
    db: DbSession,
) -> Envelope[TaskResponse]:
    """Move a task between OPEN, IN_PROGRESS and DONE (admin or assignee)."""
    task = task_service.require_task(db, task_id)
    enforce(principal, Operation.UPDATE_TASK_STATUS, task.assignee_id)
    task = task_service.update_status(db, task, body.status)
    return Envelope[TaskResponse](data=TaskResponse.model_validate(task))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(
    task_id: uuid.UUID,
    _admin: Annotated[Principal, Depends(require(Operation.DELETE_TASK))],
    db: DbSession,
) -> Response:
    """Delete a task (admin only)."""
    task_service.delete_task(db, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
