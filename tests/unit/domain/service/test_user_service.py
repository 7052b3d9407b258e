"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from qanda.domain.repository import UserRepository
from qanda.domain.service import UserService
from qanda.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterAuthor:
    """Tests for register_author."""

    @pytest.mark.asyncio
    async def test_records_new_author(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        caller = make_user(name="Ada")

        # Act
        await user_service.register_author(caller)

        # Assert
        stored = await user_repo.find_by_id(caller.user_id)
        assert stored is not None
        assert stored.name == "Ada"

    @pytest.mark.asyncio
    async def test_renamed_author_is_refreshed(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        caller = make_user(name="Ada")
        await user_service.register_author(caller)

        await user_service.register_author(caller.model_copy(update={"name": "Ada L."}))

        stored = await user_repo.find_by_id(caller.user_id)
        assert stored.name == "Ada L."

    @pytest.mark.asyncio
    async def test_nameless_identity_is_not_recorded(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        caller = make_user(name=None)

        await user_service.register_author(caller)

        assert await user_repo.find_by_id(caller.user_id) is None


class TestResolveAuthors:
    """Tests for resolve_authors."""

    @pytest.mark.asyncio
    async def test_unknown_users_get_placeholder(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        known = make_user(name="Grace")
        await user_service.register_author(known)
        unknown_id = UserId(uuid4())

        # Act
        authors = await user_service.resolve_authors(
            [known.user_id, unknown_id, known.user_id]
        )

        # Assert
        assert set(authors) == {known.user_id, unknown_id}
        assert authors[known.user_id].name == "Grace"
        assert authors[unknown_id].name == "Unknown User"

    @pytest.mark.asyncio
    async def test_empty_request_skips_lookup(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.resolve_authors([]) == {}
