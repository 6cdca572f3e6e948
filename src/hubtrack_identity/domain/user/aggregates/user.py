"""User aggregate for identity concerns only."""

from copy import deepcopy
from datetime import datetime
from typing import Any, Union
from uuid import UUID, uuid4

from hubtrack_identity.domain.shared.time import utc_now
from hubtrack_identity.domain.user.value_objects import Email, UserRole


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


class User:
    """
    User aggregate root.

    Holds the account identity (email, role, activity state) and the
    user's preference settings. The password hash lives in the credential
    repository and never passes through this aggregate.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        name: str = "",
        company: str = "",
        role: Union[str, UserRole] = UserRole.USER,
        id: UUID | None = None,
        is_active: bool = True,
        last_login: datetime | None = None,
        settings: dict[str, Any] | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._name = name.strip()
        self._company = company.strip()
        self._role = UserRole.parse(role)
        self._is_active = is_active
        self._last_login = last_login
        self._settings = deepcopy(settings) if settings else {}
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def company(self) -> str:
        return self._company

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def last_login(self) -> datetime | None:
        return self._last_login

    @property
    def settings(self) -> dict[str, Any]:
        return deepcopy(self._settings)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def record_login(self) -> None:
        self._last_login = utc_now()
        self._updated_at = self._last_login

    def deactivate(self) -> None:
        """Move the account to its terminal deactivated state."""
        self._is_active = False
        self._updated_at = utc_now()

    def update_settings(self, changes: dict[str, Any]) -> None:
        """Merge ``changes`` into the existing settings.

        Nested mappings are merged key by key, so a partial update never
        drops sibling preferences.
        """
        self._settings = _deep_merge(self._settings, changes)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str = "",
        company: str = "",
        role: Union[str, UserRole] = UserRole.USER,
    ) -> "User":
        return cls(email=email, name=name, company=company, role=role)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str,
        company: str,
        role: Union[str, UserRole],
        is_active: bool,
        last_login: datetime | None,
        settings: dict[str, Any] | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            company=company,
            role=role,
            is_active=is_active,
            last_login=last_login,
            settings=settings,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
