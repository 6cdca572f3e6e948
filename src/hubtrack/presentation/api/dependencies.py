"""Request-scoped wiring for the Hubtrack API.

One database session is shared by every dependency of a request. The
identity services are rebuilt per request from the cached settings, and
the bearer-token dependencies resolve the caller and check roles.
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Callable, Coroutine

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hubtrack_config.settings import Settings, get_settings
from hubtrack_identity import (
    AuthenticationService,
    InsufficientRoleError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    PasswordResetService,
    User,
    UserContext,
    UserRole,
)
from hubtrack_identity.infrastructure.email import EmailService
from hubtrack_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_settings)]


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine built from ``Settings.database_url``."""
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for the request.

    Routers commit explicitly; anything left uncommitted is rolled back
    when the session closes.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with the signing secret from settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        session_token_expire_days=settings.jwt_session_token_expire_days,
        reset_token_expire_hours=settings.jwt_reset_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_email_service(settings: SettingsDep) -> EmailService:
    return EmailService(settings)


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_password_reset_service(  # noqa: PLR0913
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
    email_service: EmailServiceDep,
) -> PasswordResetService:
    return PasswordResetService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        email_service=email_service,
        frontend_base_url=settings.frontend_base_url,
        log_tokens=settings.is_development,
    )


ResetService = Annotated[PasswordResetService, Depends(get_password_reset_service)]


# -----------------------------------------------------------------------------
# Caller identity and roles
# -----------------------------------------------------------------------------


BearerCredentials = Annotated[HTTPAuthorizationCredentials | None, Depends(security)]


def get_bearer_token(credentials: BearerCredentials) -> str:
    """Extract the raw token from ``Authorization: Bearer <token>``.

    Raises
    ------
    InvalidTokenError
        If the header is missing or not a bearer token
    """
    if credentials is None:
        msg = "Authentication required"
        raise InvalidTokenError(msg)
    return credentials.credentials


BearerToken = Annotated[str, Depends(get_bearer_token)]


async def get_current_user(token: BearerToken, auth_service: AuthService) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Verifies the session token and loads the corresponding User.
    Password reset tokens are rejected.

    Raises
    ------
    InvalidTokenError
        401 if the token is missing, invalid, expired or of the wrong type
    UserNotFoundError
        404 if the account behind the token no longer exists
    """
    _, user = await auth_service.authenticate(token)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_user_context(user: CurrentUser) -> UserContext:
    return UserContext.create(user)


CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


def require_roles(
    *roles: UserRole,
) -> Callable[[UserContext], Coroutine[None, None, UserContext]]:
    """Build a dependency that only lets the given roles through.

    Examples
    --------
    >>> @router.get("/", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """

    async def _require(user_context: CurrentUserContext) -> UserContext:
        if not user_context.has_role(*roles):
            logger.warning(
                "User %s with role %s denied, requires one of: %s",
                user_context.email,
                user_context.role.value,
                ", ".join(role.value for role in roles),
            )
            raise InsufficientRoleError
        return user_context

    return _require


AdminUser = Annotated[UserContext, Depends(require_roles(UserRole.ADMIN))]
TeamLead = Annotated[
    UserContext,
    Depends(require_roles(UserRole.ADMIN, UserRole.MANAGER)),
]
