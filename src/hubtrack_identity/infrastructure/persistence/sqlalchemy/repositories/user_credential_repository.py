"""Password hash storage on the ``user_credentials`` table."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hubtrack_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
)
from hubtrack_identity.repositories import UserCredentialData, UserCredentialRepository

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    """One credential row per account, keyed by ``user_id``."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _row(self, user_id: UUID) -> UserCredentialModel | None:
        return await self._session.scalar(
            select(UserCredentialModel).where(UserCredentialModel.user_id == user_id),
        )

    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        row = await self._row(user_id)
        if row is None:
            row = UserCredentialModel(user_id=user_id, password_hash=password_hash)
            self._session.add(row)
        else:
            # updated_at is bumped by the column's onupdate
            row.password_hash = password_hash

        await self._session.flush()
        logger.debug("Stored password hash for user %s", user_id)
        return UserCredentialData(user_id=row.user_id, password_hash=row.password_hash)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        row = await self._row(user_id)
        if row is None:
            return None
        return UserCredentialData(user_id=row.user_id, password_hash=row.password_hash)

    async def delete(self, user_id: UUID) -> bool:
        row = await self._row(user_id)
        if row is None:
            return False

        await self._session.delete(row)
        await self._session.flush()
        logger.info("Deleted credentials for user %s", user_id)
        return True
