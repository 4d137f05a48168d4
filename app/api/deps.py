"""Request pipeline dependencies: authenticate (guard), then authorize (policy)."""

import logging
import uuid
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import Forbidden
from app.core.security import TokenService, get_token_service
from app.schemas.auth import Principal
from app.services.authentication import authenticate
from app.services.authorization import Decision, Operation, decide

logger = logging.getLogger(__name__)

# Raw header value; the scheme is checked by authenticate(), case-sensitively.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer <access token>",
)


def get_current_user(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> Principal:
    """Dependency: require a valid Bearer JWT for an active user. Raises 401 otherwise."""
    return authenticate(authorization, tokens, db)


def enforce(
    principal: Principal,
    operation: Operation,
    resource_id: uuid.UUID | None = None,
) -> None:
    """Raise Forbidden unless the policy allows the operation."""
    if decide(principal, operation, resource_id) is Decision.DENY:
        logger.info(
            "Policy denied operation",
            extra={
                "user_id": str(principal.id),
                "role": principal.role.value,
                "operation": operation.value,
            },
        )
        raise Forbidden("You do not have permission to perform this action")


def require(operation: Operation) -> Callable[..., Principal]:
    """Dependency factory for operations that need no resource id."""

    def dependency(
        principal: Annotated[Principal, Depends(get_current_user)],
    ) -> Principal:
        enforce(principal, operation)
        return principal

    dependency.__name__ = f"require_{operation.value}"
    return dependency


CurrentUser = Annotated[Principal, Depends(get_current_user)]
DbSession = Annotated[Session, Depends(get_db)]
