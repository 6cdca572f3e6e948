"""Common schemas shared across API endpoints."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FieldError(BaseModel):
    """A single invalid request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")
    errors: list[FieldError] | None = Field(
        default=None,
        description="Per-field messages for request validation failures",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Invalid email or password", "code": "INVALID_CREDENTIALS"},
        },
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=_utc_now)
