"""Credential storage contract.

Password hashes live apart from the account record, so loading a ``User``
never pulls its hash along.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    user_id: UUID
    password_hash: str


class UserCredentialRepository(ABC):
    """Stores exactly one bcrypt digest per account."""

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """Insert the digest for ``user_id`` or replace the existing one."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        """Return the stored digest, or None for an unknown account."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Remove the digest. Returns False when there was nothing to delete."""
