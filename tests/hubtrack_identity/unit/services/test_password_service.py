"""Tests for PasswordHashingService."""

import pytest

from hubtrack_identity import PasswordHashingService, WeakPasswordError
from hubtrack_identity.exceptions import ErrorCode


class TestPasswordHashing:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_hash_differs_from_password(self):
        digest = self.service.hash("Passw0rd")

        assert digest != "Passw0rd"
        assert digest.startswith("$2")

    def test_hash_is_salted(self):
        assert self.service.hash("Passw0rd") != self.service.hash("Passw0rd")

    def test_verify_correct_password(self):
        digest = self.service.hash("Passw0rd")

        assert self.service.verify("Passw0rd", digest) is True

    def test_verify_wrong_password(self):
        digest = self.service.hash("Passw0rd")

        assert self.service.verify("Passw0rd!", digest) is False

    @pytest.mark.parametrize("digest", ["", "not-a-bcrypt-hash", "$2b$04$short"])
    def test_verify_malformed_digest_returns_false(self, digest):
        assert self.service.verify("Passw0rd", digest) is False

    def test_verify_non_string_digest_returns_false(self):
        assert self.service.verify("Passw0rd", None) is False  # type: ignore[arg-type]

    def test_default_work_factor(self):
        service = PasswordHashingService()

        assert service.needs_rehash("$2b$12$" + "a" * 53) is False


class TestPasswordStrength:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("", "Password cannot be empty"),
            ("12345", "Password must be at least 6 characters"),
            ("x" * 73, "Password must be at most 72 characters"),
            ("é" * 40, "Password must be at most 72 bytes"),
        ],
    )
    def test_rejects_weak_passwords(self, password, message):
        with pytest.raises(WeakPasswordError) as exc_info:
            self.service.hash(password)

        assert exc_info.value.message == message
        assert exc_info.value.code == ErrorCode.WEAK_PASSWORD

    def test_accepts_boundary_lengths(self):
        self.service.validate_strength("123456")
        self.service.validate_strength("x" * 72)


class TestNeedsRehash:
    def test_same_rounds(self):
        service = PasswordHashingService(rounds=4)

        assert service.needs_rehash(service.hash("Passw0rd")) is False

    def test_different_rounds(self):
        old = PasswordHashingService(rounds=4).hash("Passw0rd")

        assert PasswordHashingService(rounds=5).needs_rehash(old) is True

    def test_garbage_digest(self):
        assert PasswordHashingService(rounds=4).needs_rehash("garbage") is True
