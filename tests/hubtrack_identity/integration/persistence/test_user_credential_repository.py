"""Integration tests for UserCredentialRepositorySQLAlchemy."""

from uuid import uuid4

import pytest

from hubtrack_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
)


@pytest.fixture
def credential_repo(db_session):
    return UserCredentialRepositorySQLAlchemy(db_session)


@pytest.mark.integration
class TestUserCredentialRepositorySQLAlchemy:
    async def test_save_and_find(self, credential_repo):
        user_id = uuid4()

        saved = await credential_repo.save(user_id, "$2b$04$hash")
        found = await credential_repo.find_by_user_id(user_id)

        assert saved.user_id == user_id
        assert found is not None
        assert found.user_id == user_id
        assert found.password_hash == "$2b$04$hash"

    async def test_save_twice_updates_hash(self, credential_repo):
        user_id = uuid4()
        await credential_repo.save(user_id, "first")

        await credential_repo.save(user_id, "second")
        found = await credential_repo.find_by_user_id(user_id)

        assert found.password_hash == "second"

    async def test_find_unknown_user(self, credential_repo):
        assert await credential_repo.find_by_user_id(uuid4()) is None

    async def test_delete(self, credential_repo):
        user_id = uuid4()
        await credential_repo.save(user_id, "hash")

        assert await credential_repo.delete(user_id) is True
        assert await credential_repo.find_by_user_id(user_id) is None
        assert await credential_repo.delete(user_id) is False
