"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from quill.domain.error import NotFoundError
from quill.domain.repository import UserRepository
from quill.domain.service import UserService
from quill.domain.value import UserId, UserRole
from quill.util.password import verify_password
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user."""

    @pytest.mark.asyncio
    async def test_stores_hashed_password(self, unit_env):
        user_service = await unit_env.get(UserService)

        user = await user_service.create_user(
            username="alice",
            email="alice@example.com",
            password="s3cret-pass",
            display_name="Alice",
        )

        assert user.role == UserRole.READER
        assert user.password_hash != "s3cret-pass"
        assert verify_password("s3cret-pass", user.password_hash)
        assert await user_service.get_by_id(user.id) == user


class TestFindByLogin:
    """Tests for find_by_login."""

    @pytest.mark.asyncio
    async def test_finds_by_username_or_email(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(username="bob"))

        assert await user_service.find_by_login("bob") == user
        assert await user_service.find_by_login("BOB@example.com") == user

    @pytest.mark.asyncio
    async def test_unknown_login_returns_none(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.find_by_login("nobody") is None
        assert await user_service.find_by_login("   ") is None


class TestEnsureUser:
    """Tests for ensure_user."""

    @pytest.mark.asyncio
    async def test_existing_user_is_left_untouched(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        existing = await user_repo.save(
            make_user(role=UserRole.ADMIN, username="admin")
        )

        user, created = await user_service.ensure_user(
            username="admin",
            email="other@example.com",
            password="new-password",
            display_name="Other",
            role=UserRole.ADMIN,
        )

        assert created is False
        assert user == existing


class TestGetUsers:
    """Tests for get_by_id and get_by_ids."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_by_ids_skips_unknown(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        users = await user_service.get_by_ids([user.id, UserId(uuid4()), user.id])

        assert users == {user.id: user}
