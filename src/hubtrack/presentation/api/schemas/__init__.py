"""Request and response models for the Hubtrack API."""

from hubtrack.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UpdateSettingsRequest,
    UserMessageResponse,
    UserResponse,
    VerifyResponse,
)
from hubtrack.presentation.api.schemas.common import (
    ErrorResponse,
    FieldError,
    HealthResponse,
    MessageResponse,
)
from hubtrack.presentation.api.schemas.users import UserListResponse

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ErrorResponse",
    "FieldError",
    "ForgotPasswordRequest",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "ResetPasswordRequest",
    "UpdateSettingsRequest",
    "UserListResponse",
    "UserMessageResponse",
    "UserResponse",
    "VerifyResponse",
]
