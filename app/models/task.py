"""ORM model for tasks, optionally assigned to a user."""

import enum
import uuid

from sqlalchemy import Column, DateTime, Enum, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class TaskStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(Base):
    """
    A unit of work created by an admin.

    assignee_id is a weak reference: deleting a task never touches the user,
    and users are never hard-deleted.
    """

    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        Enum(TaskStatus, name="task_status_enum"),
        nullable=False,
        default=TaskStatus.OPEN,
    )
    assignee_id = Column(Uuid, ForeignKey("users.id"), nullable=True, index=True)
    created_by_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    assignee = relationship("User", foreign_keys=[assignee_id], lazy="joined")
