"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from hubtrack_identity.domain.user import (
    CannotDeactivateSelfError,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRole,
)
from hubtrack_identity.exceptions import (
    AccountDeactivatedError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from hubtrack_identity.schemas import TokenPayload

if TYPE_CHECKING:
    from hubtrack_identity.application.context import UserContext
    from hubtrack_identity.domain.user import UserRepository
    from hubtrack_identity.repositories import UserCredentialRepository
    from hubtrack_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and JWT tokens with the User domain
    to provide:
    - User registration
    - Login with password
    - Token refresh and logout
    - Password change and settings update
    - Bearer token authentication for protected requests

    Session tokens are stateless. Logging out or deactivating an account
    does not revoke tokens that were already issued; they remain valid
    until they expire.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _create_session_token(self, user: User) -> str:
        return self._jwt_service.create_session_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )

    async def register(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        company: str,
        role: str | UserRole | None = None,
    ) -> tuple[User, str]:
        """Create an account and issue its first session token.

        Parameters
        ----------
        name
            Display name
        email
            Email address, normalized before the duplicate check
        password
            Plaintext password, hashed before persistence
        company
            Company name
        role
            Optional role, defaults to ``user``

        Returns
        -------
        Tuple of the created User and a session token

        Raises
        ------
        EmailAlreadyExistsError
            If an account already uses the normalized email
        WeakPasswordError
            If the password does not meet requirements
        """
        email_obj = Email(email)
        if await self._user_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = self._password_service.hash(password)
        user = User.create(
            email_obj,
            name=name,
            company=company,
            role=role or UserRole.USER,
        )
        user.record_login()

        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        token = self._create_session_token(user)

        logger.info("User registered: %s (role: %s)", user.email, user.role.value)
        return user, token

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Authenticate with email and password.

        Unknown email and wrong password raise the same error. A correct
        password on a deactivated account raises ``AccountDeactivatedError``
        and leaves ``last_login`` untouched.
        Hashes made with an outdated work factor are replaced on success.
        """
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            user = None
        if user is None:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None or not self._password_service.verify(
            password,
            credential.password_hash,
        ):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError

        if not user.is_active:
            logger.warning("Login attempt on deactivated account: %s", user.id)
            raise AccountDeactivatedError

        if self._password_service.needs_rehash(credential.password_hash):
            await self._credential_repo.save(
                user_id=user.id,
                password_hash=self._password_service.hash(password),
            )
            logger.info("Password hash upgraded for user: %s", user.id)

        user.record_login()
        await self._user_repo.save(user)

        token = self._create_session_token(user)

        logger.info("User logged in: %s", user.email)
        return user, token

    async def refresh_token(self, token: str) -> tuple[User, str]:
        """Issue a fresh session token for a still valid one.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired or not a session token
        UserNotFoundError
            If the account no longer exists
        AccountDeactivatedError
            If the account has been deactivated
        """
        payload = self._jwt_service.verify_token(token)
        if not payload.is_session_token():
            msg = "Invalid token type"
            raise InvalidTokenError(msg)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            raise UserNotFoundError(str(payload.user_id))
        if not user.is_active:
            raise AccountDeactivatedError

        new_token = self._create_session_token(user)

        logger.debug("Token refreshed for user: %s", user.email)
        return user, new_token

    async def logout(self, user_context: UserContext) -> None:
        # Stateless tokens: nothing to revoke server side
        logger.info("User logged out: %s", user_context.email)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        credential = await self._credential_repo.find_by_user_id(user_id)
        if credential is None:
            raise UserNotFoundError(str(user_id))
        if not self._password_service.verify(
            current_password,
            credential.password_hash,
        ):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        new_hash = self._password_service.hash(new_password)
        await self._credential_repo.save(user_id=user_id, password_hash=new_hash)

        logger.info("Password changed for user: %s", user_id)

    async def update_settings(self, user_id: UUID, changes: dict[str, Any]) -> User:
        user = await self.get_user(user_id)
        user.update_settings(changes)
        await self._user_repo.save(user)

        logger.info("Settings updated for user: %s", user_id)
        return user

    async def get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def list_users(self) -> list[User]:
        return await self._user_repo.list_all()

    async def deactivate_user(self, actor: UserContext, user_id: UUID) -> User:
        """Deactivate another user's account.

        Raises
        ------
        CannotDeactivateSelfError
            If ``actor`` targets their own account
        UserNotFoundError
            If no account exists with ``user_id``
        """
        if actor.user_id == user_id:
            raise CannotDeactivateSelfError

        user = await self.get_user(user_id)
        user.deactivate()
        await self._user_repo.save(user)

        logger.info("User %s deactivated by %s", user.email, actor.email)
        return user

    async def authenticate(self, token: str) -> tuple[TokenPayload, User]:
        """Resolve a bearer token to its account.

        Password reset tokens are rejected here, they only work at the
        reset endpoint.
        """
        payload = self._jwt_service.verify_token(token)
        if not payload.is_session_token():
            logger.warning(
                "Non-session token presented for user: %s",
                payload.user_id,
            )
            msg = "Invalid token type"
            raise InvalidTokenError(msg)

        user = await self.get_user(payload.user_id)
        return payload, user
