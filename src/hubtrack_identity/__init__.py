"""Hubtrack Identity - accounts, authentication and password management.

This package handles all identity-related concerns:
- Account management (registration, roles, deactivation, settings)
- Authentication (login, session tokens, refresh)
- Password management (hashing, change, reset)
- Email notifications (password reset links)

Time-tracking features elsewhere only reference ``user_id``, keeping
identity concerns separated.
"""

from hubtrack_identity.application.context import UserContext
from hubtrack_identity.application.services import (
    AuthenticationService,
    PasswordResetService,
)
from hubtrack_identity.domain.user import (
    CannotDeactivateSelfError,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from hubtrack_identity.exceptions import (
    AccountDeactivatedError,
    AuthError,
    ErrorCode,
    IdentityError,
    InsufficientRoleError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    InvalidTokenError,
    TokenExpiredError,
    TokenSignatureError,
    WeakPasswordError,
)
from hubtrack_identity.repositories import (
    UserCredentialData,
    UserCredentialRepository,
)
from hubtrack_identity.schemas import TokenPayload
from hubtrack_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
    "CannotDeactivateSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    # Exceptions
    "AccountDeactivatedError",
    "AuthError",
    "ErrorCode",
    "IdentityError",
    "InsufficientRoleError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenSignatureError",
    "WeakPasswordError",
    # Repositories
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application Context
    "UserContext",
    # Application Services
    "AuthenticationService",
    "PasswordResetService",
]
