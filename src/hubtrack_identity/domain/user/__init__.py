"""User domain manages account identity.

This domain handles:
- User aggregate (identity: id, email, role, activity state, preferences)
- Email normalization and role validation
- Repository contract for account persistence
"""

from hubtrack_identity.domain.user.aggregates import User
from hubtrack_identity.domain.user.exceptions import (
    CannotDeactivateSelfError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
    UserNotFoundError,
)
from hubtrack_identity.domain.user.repositories import UserRepository
from hubtrack_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "CannotDeactivateSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
