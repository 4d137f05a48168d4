"""
Authentication: bearer header parsing, token-to-user resolution, signup and signin.

authenticate() is the request guard. It trusts the token only for identity;
the role it returns is always read from the current user record, so a role
change takes effect on the next request even though the token still carries
the old role claim.
"""

import logging

from sqlalchemy.orm import Session

from app.core.errors import Unauthorized
from app.core.security import TokenError, TokenService, verify_password
from app.models import User
from app.schemas.auth import Principal, SignUpRequest
from app.services.users import create_user, get_user_by_id, get_user_by_username, record_login

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

INVALID_CREDENTIALS = "Invalid username or password"


def parse_bearer(authorization: str | None) -> str:
    """Return the token from an exact 'Bearer <token>' header value or raise Unauthorized."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthorized("Missing or malformed Authorization header")
    token = authorization[len(BEARER_PREFIX):]
    if not token or token != token.strip() or " " in token:
        raise Unauthorized("Missing or malformed Authorization header")
    return token


def authenticate(authorization: str | None, tokens: TokenService, db: Session) -> Principal:
    """Verify the bearer token and resolve it to the current, active user."""
    token = parse_bearer(authorization)
    try:
        claimed = tokens.verify(token)
    except TokenError as e:
        logger.info("Rejected bearer token: %s", type(e).__name__)
        raise Unauthorized("Invalid or expired token") from e

    user = get_user_by_id(db, claimed.id)
    if user is None or not user.is_active:
        logger.info(
            "Rejected token for unknown or inactive user",
            extra={"user_id": str(claimed.id)},
        )
        raise Unauthorized("User not found or inactive")
    return Principal(id=user.id, username=user.username, role=user.role)


def sign_up(db: Session, body: SignUpRequest) -> User:
    """Create an account; raises Conflict on a duplicate username."""
    return create_user(db, body.username, body.password, body.role)


def sign_in(db: Session, tokens: TokenService, username: str, password: str) -> str:
    """
    Check credentials and return a fresh access token.

    Unknown user, wrong password and inactive user all produce the same 401.
    """
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Signin failed", extra={"username": username})
        raise Unauthorized(INVALID_CREDENTIALS)
    if not user.is_active:
        logger.info("Signin refused for inactive user", extra={"user_id": str(user.id)})
        raise Unauthorized(INVALID_CREDENTIALS)
    record_login(db, user)
    logger.info("Signin succeeded", extra={"user_id": str(user.id)})
    return tokens.issue(Principal(id=user.id, username=user.username, role=user.role))
