"""Password reset flow built on short-lived reset tokens."""

import logging
from urllib.parse import urlencode

from hubtrack_identity.domain.user import (
    InvalidEmailError,
    UserNotFoundError,
    UserRepository,
)
from hubtrack_identity.exceptions import InvalidResetTokenError
from hubtrack_identity.infrastructure.email import EmailService
from hubtrack_identity.repositories import UserCredentialRepository
from hubtrack_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent"
)


class PasswordResetService:
    """Service for handling password reset requests and token validation.

    Reset tokens are signed JWTs with a ``password_reset`` type. Nothing is
    stored server side, so a token can be replayed until it expires.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        email_service: EmailService,
        frontend_base_url: str,
        log_tokens: bool = False,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._email_service = email_service
        self._frontend_base_url = frontend_base_url.rstrip("/")
        self._log_tokens = log_tokens

    def build_reset_link(self, token: str) -> str:
        return f"{self._frontend_base_url}/reset-password?{urlencode({'token': token})}"

    async def request_reset(self, email: str) -> str:
        """Issue a reset token for ``email`` if such an account exists.

        Returns the same generic message whether or not the account exists.
        """
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            user = None
        if not user:
            logger.debug("Password reset requested for unknown email")
            return RESET_REQUESTED_MESSAGE

        token = self._jwt_service.create_password_reset_token(
            user_id=user.id,
            email=user.email,
        )
        if self._log_tokens:
            logger.info("Password reset token for %s: %s", user.email, token)

        reset_link = self.build_reset_link(token)
        try:
            self._email_service.send_password_reset_email(
                to_email=user.email,
                reset_link=reset_link,
                name=user.name or "there",
            )
            logger.info("Password reset requested for user: %s", user.id)
        except Exception as e:
            logger.error("Failed to send password reset email: %s", e)

        return RESET_REQUESTED_MESSAGE

    async def reset_password(self, token: str, new_password: str) -> None:
        """Set a new password using a reset token.

        Raises
        ------
        InvalidTokenError
            If the token signature is invalid or the token expired
        InvalidResetTokenError
            If the token is valid but not a password reset token
        UserNotFoundError
            If the account no longer exists
        WeakPasswordError
            If the new password does not meet requirements
        """
        payload = self._jwt_service.verify_token(token)
        if not payload.is_password_reset_token():
            raise InvalidResetTokenError

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            raise UserNotFoundError(str(payload.user_id))

        new_hash = self._password_service.hash(new_password)
        await self._credential_repo.save(user_id=user.id, password_hash=new_hash)

        logger.info("Password reset completed for user: %s", user.id)
