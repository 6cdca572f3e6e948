"""Tests for the User aggregate."""

from datetime import timedelta
from uuid import uuid4

import pytest

from hubtrack_identity.domain.shared.time import utc_now
from hubtrack_identity.domain.user import InvalidEmailError, User, UserRole


class TestUserCreate:
    def test_create_defaults(self):
        user = User.create("  Alice@X.com", name=" Alice ", company=" Acme ")

        assert user.email == "alice@x.com"
        assert user.name == "Alice"
        assert user.company == "Acme"
        assert user.role == UserRole.USER
        assert user.is_active is True
        assert user.is_admin is False
        assert user.last_login is None
        assert user.settings == {}
        assert user.created_at.tzinfo is not None

    def test_create_generates_unique_ids(self):
        assert User.create("a@example.com").id != User.create("a@example.com").id

    def test_create_with_role_string(self):
        user = User.create("boss@example.com", role="admin")

        assert user.role == UserRole.ADMIN
        assert user.is_admin is True

    def test_create_rejects_invalid_email(self):
        with pytest.raises(InvalidEmailError):
            User.create("not-an-email")


class TestUserLifecycle:
    def test_record_login_sets_timestamp(self, test_user):
        before = utc_now()

        test_user.record_login()

        assert test_user.last_login is not None
        assert test_user.last_login >= before

    def test_deactivate(self, test_user):
        test_user.deactivate()

        assert test_user.is_active is False

    def test_reconstitute_keeps_identity(self):
        user_id = uuid4()
        created = utc_now() - timedelta(days=3)

        user = User.reconstitute(
            id=user_id,
            email="alice@x.com",
            name="Alice",
            company="Acme",
            role="manager",
            is_active=False,
            last_login=None,
            settings={"theme": "dark"},
            created_at=created,
            updated_at=created,
        )

        assert user.id == user_id
        assert user.role == UserRole.MANAGER
        assert user.is_active is False
        assert user.settings == {"theme": "dark"}
        assert user.created_at == created

    def test_equality_is_by_id(self):
        user_id = uuid4()
        now = utc_now()
        kwargs = dict(
            name="",
            company="",
            role="user",
            is_active=True,
            last_login=None,
            settings=None,
            created_at=now,
            updated_at=now,
        )
        first = User.reconstitute(id=user_id, email="a@example.com", **kwargs)
        second = User.reconstitute(id=user_id, email="b@example.com", **kwargs)

        assert first == second
        assert hash(first) == hash(second)
        assert first != User.create("a@example.com")


class TestUserSettings:
    def test_update_merges_nested_settings(self, test_user):
        test_user.update_settings(
            {"notifications": {"email": True, "push": True}, "theme": "light"},
        )

        test_user.update_settings({"notifications": {"push": False}})

        assert test_user.settings == {
            "notifications": {"email": True, "push": False},
            "theme": "light",
        }

    def test_update_replaces_non_mapping_values(self, test_user):
        test_user.update_settings({"timezone": {"name": "UTC"}})

        test_user.update_settings({"timezone": "Europe/Berlin"})

        assert test_user.settings == {"timezone": "Europe/Berlin"}

    def test_settings_returns_a_copy(self, test_user):
        test_user.update_settings({"notifications": {"email": True}})

        snapshot = test_user.settings
        snapshot["notifications"]["email"] = False

        assert test_user.settings["notifications"]["email"] is True
