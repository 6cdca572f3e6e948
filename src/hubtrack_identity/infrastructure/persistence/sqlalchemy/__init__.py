"""SQLAlchemy implementation for hubtrack_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserCredentialModel: SQLAlchemy model for credentials
- UserRepositorySQLAlchemy: Repository implementation for users
- UserCredentialRepositorySQLAlchemy: Repository implementation for credentials
"""

from hubtrack_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from hubtrack_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
    UserModel,
)
from hubtrack_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
