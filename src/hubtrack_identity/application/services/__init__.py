"""Application services for identity management."""

from hubtrack_identity.application.services.authentication_service import (
    AuthenticationService,
)
from hubtrack_identity.application.services.password_reset_service import (
    RESET_REQUESTED_MESSAGE,
    PasswordResetService,
)

__all__ = ["RESET_REQUESTED_MESSAGE", "AuthenticationService", "PasswordResetService"]
