"""Task store operations. Authorization is decided by the caller before these run."""

import logging
import uuid

from sqlalchemy.orm import Session

from app.core.errors import InvalidInput, NotFound
from app.models import Task, TaskStatus
from app.schemas.auth import Principal
from app.services.users import require_user

logger = logging.getLogger(__name__)


def list_tasks(db: Session, assignee_id: uuid.UUID | None = None) -> list[Task]:
    """All tasks, or only those assigned to assignee_id when given."""
    query = db.query(Task)
    if assignee_id is not None:
        query = query.filter(Task.assignee_id == assignee_id)
    return query.order_by(Task.created_at, Task.title).all()


def require_task(db: Session, task_id: uuid.UUID) -> Task:
    task = db.get(Task, task_id)
    if task is None:
        raise NotFound(f'Task with ID "{task_id}" not found')
    return task


def create_task(db: Session, creator: Principal, title: str, description: str) -> Task:
    task = Task(
        title=title,
        description=description,
        status=TaskStatus.OPEN,
        created_by_id=creator.id,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info(
        "Task created",
        extra={"task_id": str(task.id), "created_by": str(creator.id)},
    )
    return task


def assign_task(db: Session, task_id: uuid.UUID, user_id: uuid.UUID) -> Task:
    """Assign a task to an active user. Task is resolved first, then the user."""
    task = require_task(db, task_id)
    user = require_user(db, user_id)
    if not user.is_active:
        raise InvalidInput("Cannot assign a task to an inactive user")
    task.assignee_id = user.id
    db.commit()
    db.refresh(task)
    logger.info(
        "Task assigned",
        extra={"task_id": str(task.id), "assignee_id": str(user.id)},
    )
    return task


def update_status(db: Session, task: Task, status: TaskStatus) -> Task:
    task.status = status
    db.commit()
    db.refresh(task)
    logger.info(
        "Task status changed",
        extra={"task_id": str(task.id), "status": status.value},
    )
    return task


def delete_task(db: Session, task_id: uuid.UUID) -> None:
    task = require_task(db, task_id)
    db.delete(task)
    db.commit()
    logger.info("Task deleted", extra={"task_id": str(task_id)})
