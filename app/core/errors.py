"""Application error taxonomy. Each error maps to one HTTP status code."""

from fastapi import status


class AppError(Exception):
    """Base class for errors rendered through the uniform error envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class Unauthorized(AppError):
    """Missing, malformed, invalid, or expired credentials; or unknown/inactive subject."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(AppError):
    """Authenticated, but the authorization policy denied the operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden resource"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class Conflict(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"
