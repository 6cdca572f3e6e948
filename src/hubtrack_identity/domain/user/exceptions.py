"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from hubtrack_identity.exceptions import ErrorCode, IdentityError


class InvalidEmailError(IdentityError, ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(IdentityError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User already exists with this email",
            ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(IdentityError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class InvalidRoleError(IdentityError, ValueError):
    """Role is not one of the known user roles."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Invalid role specified: {role}", ErrorCode.VALIDATION_ERROR)


class CannotDeactivateSelfError(IdentityError):
    """Cannot deactivate your own account."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot deactivate your own account",
            ErrorCode.VALIDATION_ERROR,
        )
