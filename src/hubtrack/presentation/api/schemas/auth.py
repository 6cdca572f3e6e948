"""Authentication schemas for request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from hubtrack_identity.domain.user import User

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 72


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=2, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password (6-72 characters)",
    )
    company: str = Field(..., min_length=2, max_length=100, description="Company name")
    role: Literal["admin", "manager", "user"] | None = Field(
        default=None,
        description="Role, defaults to user",
    )

    @field_validator("name", "company", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
                "password": "Passw0rd",
                "company": "Acme",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "Passw0rd",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a user's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )


class UpdateSettingsRequest(BaseModel):
    """Partial settings update, merged into the stored preferences."""

    settings: dict[str, Any]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"settings": {"notifications": {"email": False}}},
        },
    )


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset email."""

    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    token: str = Field(..., min_length=1)
    new_password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )


class UserResponse(BaseModel):
    """Account view returned to clients. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    company: str
    role: str
    is_active: bool
    last_login: datetime | None
    settings: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            company=user.company,
            role=user.role.value,
            is_active=user.is_active,
            last_login=user.last_login,
            settings=user.settings,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Response schema for register, login and refresh."""

    message: str
    user: UserResponse
    token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful",
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Alice",
                    "email": "alice@example.com",
                    "company": "Acme",
                    "role": "user",
                    "is_active": True,
                    "last_login": "2024-12-05T10:30:00Z",
                    "settings": {},
                    "created_at": "2024-12-05T10:30:00Z",
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 604800,
            },
        },
    )


class UserMessageResponse(BaseModel):
    """A message together with the affected account."""

    message: str
    user: UserResponse


class VerifyResponse(BaseModel):
    """Response schema for token verification."""

    valid: bool
    user: UserResponse
