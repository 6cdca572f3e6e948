from enum import Enum

from hubtrack_identity.domain.user.exceptions import InvalidRoleError


class UserRole(str, Enum):
    """User roles controlling what a team member may manage."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"

    @classmethod
    def parse(cls, value: "str | UserRole") -> "UserRole":
        if isinstance(value, UserRole):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as e:
            raise InvalidRoleError(str(value)) from e
