"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from hubtrack_identity.domain.user import UserRole

if TYPE_CHECKING:
    from hubtrack_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    user_id: UUID
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email, role=user.role)

    @classmethod
    def from_values(
        cls,
        user_id: UUID,
        email: str,
        role: str | UserRole = UserRole.USER,
    ) -> UserContext:
        return cls(user_id=user_id, email=email, role=UserRole.parse(role))

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return (
            f"UserContext(user_id={self.user_id}, "
            f"email={self.email!r}, role={self.role.value!r})"
        )
