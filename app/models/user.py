"""ORM model for application users (auth and RBAC)."""

import enum
import uuid

from sqlalchemy import Boolean, Column, DateTime, Enum, String, Uuid, func

from app.models.base import Base


class UserRole(str, enum.Enum):
    """Fixed role set. SUPERADMIN is treated as at-least-admin by the policy."""

    ADMIN = "ADMIN"
    WORKER = "WORKER"
    SUPERADMIN = "SUPERADMIN"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    Users are never hard-deleted; deactivate with is_active=False instead.
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(UserRole, name="user_role_enum"),
        nullable=False,
        default=UserRole.WORKER,
    )
    is_active = Column(Boolean, nullable=False, default=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)
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

    def __repr__(self) -> str:
        return f"<User {self.username!r} role={self.role}>"
