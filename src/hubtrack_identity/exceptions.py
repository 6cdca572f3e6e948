"""Identity and authentication exceptions.

These exceptions are raised by the hubtrack_identity package and should be
caught and handled by the application layer or mapped to HTTP responses by
the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable codes sent as ``code`` in every error body.

    Clients branch on these values, so existing members keep their names.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_EMAIL = "INVALID_EMAIL"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_RESET_TOKEN = "INVALID_RESET_TOKEN"

    # Authentication Errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ACCOUNT_DEACTIVATED = "ACCOUNT_DEACTIVATED"
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"

    # Authorization Errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not Found Errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class IdentityError(Exception):
    """Base exception for all identity-related errors.

    Attributes
    ----------
    message
        Message returned to the client as ``detail``
    code
        The ``ErrorCode`` the API maps to an HTTP status
    details
        Extra context for logs, never sent to the client
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class AuthError(IdentityError):
    """Failures while authenticating a caller."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.INVALID_CREDENTIALS,
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthError):
    """The bearer or reset token cannot be used."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_OR_EXPIRED_TOKEN)


class TokenExpiredError(InvalidTokenError):
    """Raised when a JWT token's signature is valid but it has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class TokenSignatureError(InvalidTokenError):
    """Raised when a JWT token fails signature or format checks."""

    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Password outside the accepted length bounds."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password, reported identically."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class AccountDeactivatedError(AuthError):
    """Raised when a deactivated account tries to authenticate."""

    def __init__(self, message: str = "Account is deactivated"):
        super().__init__(message, ErrorCode.ACCOUNT_DEACTIVATED)


class InvalidResetTokenError(AuthError):
    """Raised when a token is not a password reset token."""

    def __init__(self, message: str = "Invalid password reset token"):
        super().__init__(message, ErrorCode.INVALID_RESET_TOKEN)


class InsufficientRoleError(AuthError):
    """Raised when the current user lacks the role required for an action."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message, ErrorCode.FORBIDDEN)
