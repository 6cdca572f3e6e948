"""Email address value object.

Validation is delegated to ``email-validator``, the library behind
pydantic's ``EmailStr``, so every address the API schemas accept is also
a valid ``Email``.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from hubtrack_identity.domain.user.exceptions import InvalidEmailError


def normalize_email(raw: str) -> str:
    """Return the lookup key for ``raw``: trimmed, validated, lower-cased.

    Raises
    ------
    InvalidEmailError
        If ``raw`` is not a syntactically valid address. The message never
        repeats the address.
    """
    candidate = (raw or "").strip()
    if not candidate:
        msg = "Email cannot be empty"
        raise InvalidEmailError(msg)

    try:
        validated = validate_email(candidate, check_deliverability=False)
    except EmailNotValidError as e:
        msg = "Invalid email format"
        raise InvalidEmailError(msg) from e

    return validated.normalized.lower()


@dataclass(frozen=True)
class Email:
    """A normalized address; two spellings of one mailbox compare equal."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", normalize_email(self.value))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.value!r})"
