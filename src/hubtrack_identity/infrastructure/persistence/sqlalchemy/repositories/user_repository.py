"""Account persistence on the ``users`` table."""

import logging
from typing import Any, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hubtrack_identity.domain.shared.time import ensure_tz_aware
from hubtrack_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from hubtrack_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_MARKERS = ("unique", "duplicate")


def _normalized(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


def _columns(user: User) -> dict[str, Any]:
    """Column values for ``user``; ``created_at`` is only written on insert."""
    return {
        "email": user.email,
        "name": user.name,
        "company": user.company,
        "role": user.role.value,
        "is_active": user.is_active,
        "last_login_at": user.last_login,
        # Always a fresh dict, so the JSON column sees the change
        "settings": user.settings,
        "updated_at": user.updated_at,
    }


def _to_domain(row: UserModel) -> User:
    return User.reconstitute(
        id=row.id,
        email=row.email,
        name=row.name,
        company=row.company,
        role=row.role,
        is_active=row.is_active,
        last_login=ensure_tz_aware(row.last_login_at) if row.last_login_at else None,
        settings=row.settings,
        created_at=ensure_tz_aware(row.created_at),
        updated_at=ensure_tz_aware(row.updated_at),
    )


class UserRepositorySQLAlchemy(UserRepository):
    """``UserRepository`` backed by an ``AsyncSession``.

    Writes are flushed but not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _one(self, *criteria) -> UserModel | None:
        result = await self._session.execute(select(UserModel).where(*criteria))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: UUID) -> User | None:
        row = await self._one(UserModel.id == user_id)
        return _to_domain(row) if row else None

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        row = await self._one(UserModel.email == _normalized(email))
        return _to_domain(row) if row else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(func.count()).where(UserModel.email == _normalized(email))
        return (await self._session.scalar(stmt) or 0) > 0

    async def save(self, user: User) -> None:
        """Insert or update ``user``.

        Raises
        ------
        EmailAlreadyExistsError
            If another account already holds the email (unique index)
        """
        row = await self._one(UserModel.id == user.id)
        if row is None:
            self._session.add(
                UserModel(id=user.id, created_at=user.created_at, **_columns(user)),
            )
        else:
            for column, value in _columns(user).items():
                setattr(row, column, value)

        try:
            await self._session.flush()
        except IntegrityError as e:
            reason = str(e.orig).lower()
            if any(marker in reason for marker in _UNIQUE_VIOLATION_MARKERS):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.debug("Saved user %s (%s)", user.id, "new" if row is None else "updated")

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        return await self._session.scalar(stmt) or 0

    async def list_all(self) -> list[User]:
        result = await self._session.scalars(
            select(UserModel).order_by(UserModel.created_at),
        )
        return [_to_domain(row) for row in result]
