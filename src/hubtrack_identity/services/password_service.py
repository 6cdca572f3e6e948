"""bcrypt password hashing.

Digests are the standard ``$2b$<rounds>$<salt+hash>`` strings, so the salt
and the work factor travel with each stored hash.
"""

import bcrypt

from hubtrack_identity.exceptions import WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """Hash and check passwords with bcrypt.

    Passwords must be between ``MIN_LENGTH`` and ``MAX_LENGTH`` characters
    and fit in ``MAX_BYTES`` once encoded, the most bcrypt accepts.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> digest = hasher.hash("Passw0rd")
    >>> hasher.verify("Passw0rd", digest)
    True
    >>> hasher.verify("passw0rd", digest)
    False
    """

    MIN_LENGTH = 6
    MAX_LENGTH = 72
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt work factor (log2 of the iteration count). Tests use 4.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return a freshly salted digest of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is outside the accepted bounds
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored digest.

        Mismatches and unreadable digests both yield False.
        """
        try:
            return bcrypt.checkpw(
                password.encode(_ENCODING),
                password_hash.encode(_ENCODING),
            )
        except (ValueError, TypeError, AttributeError):
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        problem = None
        if len(password) < self.MIN_LENGTH:
            problem = f"at least {self.MIN_LENGTH} characters"
        elif len(password) > self.MAX_LENGTH:
            problem = f"at most {self.MAX_LENGTH} characters"
        elif len(password.encode(_ENCODING)) > self.MAX_BYTES:
            problem = f"at most {self.MAX_BYTES} bytes"

        if problem:
            msg = f"Password must be {problem}"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """True when ``password_hash`` was not made with the current rounds."""
        # $2b$12$... -> ["", "2b", "12", ...]
        fields = password_hash.split("$")
        if len(fields) < 4 or not fields[2].isdigit():
            return True
        return int(fields[2]) != self._rounds
