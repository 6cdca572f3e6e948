"""JWT token service.

Provides JWT token creation and verification for authentication and
password reset.
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from hubtrack_identity.exceptions import TokenExpiredError, TokenSignatureError
from hubtrack_identity.schemas import (
    PASSWORD_RESET_TOKEN_TYPE,
    SESSION_TOKEN_TYPE,
    TokenPayload,
)


class JWTService:
    """Service for JWT token creation and verification.

    Session tokens are long-lived bearer tokens presented on each request.
    Password reset tokens are short-lived and carry a ``password_reset``
    type discriminator so they can never stand in for a session token.

    Tokens are stateless: nothing is stored server side, so an issued token
    stays valid until it expires.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_session_token(user_id, "user@example.com", "user")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_SESSION_EXPIRE_DAYS = 7
    DEFAULT_RESET_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        session_token_expire_days: int = DEFAULT_SESSION_EXPIRE_DAYS,
        reset_token_expire_hours: int = DEFAULT_RESET_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        session_token_expire_days
            Days until a session token expires (default 7)
        reset_token_expire_hours
            Hours until a password reset token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._session_expire = timedelta(days=session_token_expire_days)
        self._reset_expire = timedelta(hours=reset_token_expire_hours)

    @property
    def session_token_ttl(self) -> timedelta:
        return self._session_expire

    def create_session_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a session token carrying identity and role claims.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        role
            The user's role
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        return self.create_token(
            {
                "sub": str(user_id),
                "email": email,
                "role": role,
                "type": SESSION_TOKEN_TYPE,
            },
            expires_delta=expires_delta or self._session_expire,
        )

    def create_password_reset_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived, single-purpose password reset token."""
        return self.create_token(
            {
                "sub": str(user_id),
                "email": email,
                "type": PASSWORD_RESET_TOKEN_TYPE,
            },
            expires_delta=expires_delta or self._reset_expire,
        )

    def create_token(self, claims: dict[str, Any], expires_delta: timedelta) -> str:
        """Sign ``claims`` with issuance and expiry timestamps added.

        Parameters
        ----------
        claims
            Claims to embed; ``iat`` and ``exp`` are overwritten
        expires_delta
            Time until token expires

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            **claims,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        TokenExpiredError
            If the signature is valid but the token has expired
        TokenSignatureError
            If the token is tampered, unsigned, signed with another key,
            or its payload is malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                role=payload.get("role"),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_type=payload.get("type", SESSION_TOKEN_TYPE),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except (jwt.InvalidTokenError, KeyError, ValueError, TypeError) as e:
            # Decoder details stay server side
            raise TokenSignatureError from e
