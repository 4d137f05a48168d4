"""Signup and signin endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import DbSession
from app.core.security import TokenService, get_token_service
from app.schemas.auth import SignInRequest, SignUpRequest, TokenResponse
from app.schemas.common import Envelope
from app.schemas.users import UserResponse
from app.services.authentication import sign_in, sign_up

router = APIRouter()


@router.post(
    "/signup",
    response_model=Envelope[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def signup(body: SignUpRequest, db: DbSession) -> Envelope[UserResponse]:
    """Register a new user. Returns the created user without the password."""
    user = sign_up(db, body)
    return Envelope[UserResponse](
        status_code=status.HTTP_201_CREATED,
        data=UserResponse.model_validate(user),
    )


@router.post("/signin", response_model=Envelope[TokenResponse])
def signin(
    body: SignInRequest,
    db: DbSession,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Envelope[TokenResponse]:
    """
    Authenticate with username and password; returns a JWT access token valid for one hour.
    Include the token in the Authorization header as: Bearer <accessToken>
    """
    token = sign_in(db, tokens, body.username, body.password)
    return Envelope[TokenResponse](data=TokenResponse(access_token=token))
