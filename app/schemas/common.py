"""Shared schema base and the uniform success/error response envelopes."""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CamelModel(BaseModel):
    """Base for API schemas: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base for request bodies; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class Envelope(CamelModel, Generic[T]):
    """Success envelope wrapping every non-empty response body."""

    status_code: int = Field(default=200, description="HTTP status code")
    message: str = Field(default="Success")
    data: T
    timestamp: datetime = Field(default_factory=_utcnow)


class ErrorEnvelope(CamelModel):
    """Error envelope; data is always null."""

    status_code: int
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)
    data: None = None
