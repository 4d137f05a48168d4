"""User store: lookups, creation, and admin updates of role and active flag."""

import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound
from app.core.security import hash_password
from app.models import User, UserRole

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    return db.get(User, user_id)


def require_user(db: Session, user_id: uuid.UUID) -> User:
    """Return the user or raise NotFound."""
    user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFound(f'User with ID "{user_id}" not found')
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at, User.username).all()


def create_user(db: Session, username: str, password: str, role: UserRole) -> User:
    """
    Persist a new user with a bcrypt password hash.

    Raises Conflict when the username is taken, including when a concurrent
    insert wins the race and the unique index rejects this one.
    """
    if get_user_by_username(db, username) is not None:
        raise Conflict("Username already exists")
    user = User(
        username=username,
        password_hash=hash_password(password),
        role=role,
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict("Username already exists") from e
    db.refresh(user)
    logger.info(
        "User created",
        extra={"user_id": str(user.id), "username": user.username, "role": user.role.value},
    )
    return user


def update_role(db: Session, user_id: uuid.UUID, role: UserRole) -> User:
    """Change a user's role. Tokens already issued keep the old role claim."""
    user = require_user(db, user_id)
    previous = user.role
    user.role = role
    db.commit()
    db.refresh(user)
    logger.info(
        "User role changed",
        extra={"user_id": str(user.id), "from_role": previous.value, "to_role": role.value},
    )
    return user


def set_active(db: Session, user_id: uuid.UUID, is_active: bool) -> User:
    """Activate or deactivate a user; inactive users fail authentication."""
    user = require_user(db, user_id)
    user.is_active = is_active
    db.commit()
    db.refresh(user)
    logger.info(
        "User active flag changed",
        extra={"user_id": str(user.id), "is_active": is_active},
    )
    return user


def record_login(db: Session, user: User) -> None:
    user.last_login_at = datetime.now(UTC)
    db.commit()
