"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.task import Task, TaskStatus
from app.models.user import User, UserRole

__all__ = ["Base", "Task", "TaskStatus", "User", "UserRole"]
