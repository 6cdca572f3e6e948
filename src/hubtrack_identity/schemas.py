"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

SESSION_TOKEN_TYPE = "session"
PASSWORD_RESET_TOKEN_TYPE = "password_reset"  # NOQA: S105


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address
    role
        The user's role at issuance time (absent on reset tokens)
    issued_at
        Token issuance timestamp
    exp
        Token expiration timestamp
    token_type
        Either "session" or "password_reset"
    """

    user_id: UUID
    email: str
    role: str | None
    issued_at: datetime
    exp: datetime
    token_type: str

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_session_token(self) -> bool:
        """Check if this token authenticates requests."""
        return self.token_type == SESSION_TOKEN_TYPE

    def is_password_reset_token(self) -> bool:
        """Check if this token may only be used to reset a password."""
        return self.token_type == PASSWORD_RESET_TOKEN_TYPE
