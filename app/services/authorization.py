"""
Role- and ownership-based authorization policy.

decide() is a pure function of (principal, operation, resource id). Denial is a
normal return value; callers translate Decision.DENY into a 403. Only a missing
or malformed principal is an error.
"""

import enum
import uuid

from app.models.user import UserRole
from app.schemas.auth import Principal


class Operation(str, enum.Enum):
    LIST_USERS = "list_users"
    VIEW_USER = "view_user"
    UPDATE_USER_ROLE = "update_user_role"
    UPDATE_USER_STATUS = "update_user_status"
    VIEW_PROFILE = "view_profile"
    LIST_TASKS = "list_tasks"
    VIEW_TASK = "view_task"
    CREATE_TASK = "create_task"
    ASSIGN_TASK = "assign_task"
    UPDATE_TASK_STATUS = "update_task_status"
    DELETE_TASK = "delete_task"


class Decision(str, enum.Enum):
    ALLOW = "allow"
    DENY = "deny"


class InvalidPrincipal(Exception):
    """decide() was called without a usable principal."""


ADMIN_ROLES = frozenset({UserRole.ADMIN, UserRole.SUPERADMIN})

ADMIN_ONLY_OPERATIONS = frozenset(
    {
        Operation.LIST_USERS,
        Operation.UPDATE_USER_ROLE,
        Operation.UPDATE_USER_STATUS,
        Operation.CREATE_TASK,
        Operation.ASSIGN_TASK,
        Operation.DELETE_TASK,
    }
)

# Resource id is the user id (VIEW_USER) or the task assignee id (task operations).
SELF_OR_ADMIN_OPERATIONS = frozenset(
    {
        Operation.VIEW_USER,
        Operation.VIEW_TASK,
        Operation.UPDATE_TASK_STATUS,
    }
)

AUTHENTICATED_OPERATIONS = frozenset(
    {
        Operation.VIEW_PROFILE,
        Operation.LIST_TASKS,
    }
)


def _check_principal(principal: object) -> Principal:
    if not isinstance(principal, Principal):
        raise InvalidPrincipal("An authenticated principal is required")
    if not isinstance(principal.role, UserRole):
        raise InvalidPrincipal(f"Unknown role: {principal.role!r}")
    return principal


def is_admin(principal: Principal) -> bool:
    """True for ADMIN and SUPERADMIN."""
    return _check_principal(principal).role in ADMIN_ROLES


def decide(
    principal: Principal,
    operation: Operation,
    resource_id: uuid.UUID | None = None,
) -> Decision:
    """Return ALLOW or DENY for principal performing operation on resource_id."""
    principal = _check_principal(principal)
    admin = principal.role in ADMIN_ROLES

    if operation in AUTHENTICATED_OPERATIONS:
        return Decision.ALLOW
    if operation in ADMIN_ONLY_OPERATIONS:
        return Decision.ALLOW if admin else Decision.DENY
    if operation in SELF_OR_ADMIN_OPERATIONS:
        if admin or (resource_id is not None and principal.id == resource_id):
            return Decision.ALLOW
        return Decision.DENY
    # Unlisted operations are never allowed.
    return Decision.DENY


def scope_to_self(principal: Principal) -> bool:
    """True when list queries must be restricted to the principal's own rows (WORKER)."""
    return not is_admin(principal)
