"""Tests for UserContext."""

from uuid import uuid4

import pytest

from hubtrack_identity import InvalidRoleError, User, UserContext, UserRole


class TestUserContext:
    def test_create_from_user(self):
        user = User.create("boss@example.com", role=UserRole.ADMIN)

        context = UserContext.create(user)

        assert context.user_id == user.id
        assert context.email == "boss@example.com"
        assert context.role == UserRole.ADMIN
        assert context.is_admin is True

    def test_from_values_parses_role(self):
        context = UserContext.from_values(uuid4(), "m@example.com", "manager")

        assert context.role == UserRole.MANAGER
        assert context.is_admin is False
        assert context.has_role(UserRole.ADMIN, UserRole.MANAGER)
        assert not context.has_role(UserRole.ADMIN)

    def test_from_values_rejects_unknown_role(self):
        with pytest.raises(InvalidRoleError):
            UserContext.from_values(uuid4(), "x@example.com", "root")

    def test_is_frozen(self):
        context = UserContext.from_values(uuid4(), "x@example.com")

        with pytest.raises(AttributeError):
            context.email = "y@example.com"  # type: ignore[misc]

    def test_str(self):
        context = UserContext.from_values(uuid4(), "x@example.com")

        assert str(context) == "UserContext(x@example.com)"
