"""Identity services - JWT and password hashing."""

from hubtrack_identity.services.jwt_service import JWTService
from hubtrack_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
