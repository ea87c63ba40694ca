"""Unit tests for the auth use cases."""

import pytest

from quill.application.usecase.auth import (
    EnsureAdminUserUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from quill.config import AdminSettings
from quill.domain.error import InvalidCredentialsError, UnauthenticatedError
from quill.domain.repository import UserRepository
from quill.domain.service import UserService
from quill.domain.value import UserRole, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase and GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_token_and_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        login_use_case = await unit_env.get(LoginUseCase)
        me_use_case = await unit_env.get(GetCurrentUserUseCase)
        await user_service.create_user(
            username="frank",
            email="frank@example.com",
            password="hunter22",
            display_name="Frank",
            role=UserRole.ADMIN,
        )

        response = await login_use_case.execute(
            LoginRequest(username="frank", password="hunter22")
        )
        me = await me_use_case.execute(GetCurrentUserRequest(token=response.token))

        assert response.user.username == "frank"
        assert response.user.role == UserRole.ADMIN
        assert me == response.user
        assert "passwordHash" not in response.model_dump(by_alias=True)["user"]

    @pytest.mark.asyncio
    async def test_bad_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        login_use_case = await unit_env.get(LoginUseCase)
        await user_service.create_user(
            username="frank",
            email="frank@example.com",
            password="hunter22",
            display_name="Frank",
        )

        with pytest.raises(InvalidCredentialsError):
            await login_use_case.execute(
                LoginRequest(username="frank", password="hunter2")
            )

    @pytest.mark.asyncio
    async def test_current_user_requires_token(self, unit_env):
        me_use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthenticatedError):
            await me_use_case.execute(GetCurrentUserRequest(token=None))


class TestEnsureAdminUserUseCase:
    """Tests for EnsureAdminUserUseCase."""

    @pytest.mark.asyncio
    async def test_creates_admin_once(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        settings = AdminSettings(username="root", password="bootstrap-pw")
        use_case = EnsureAdminUserUseCase(user_service, settings)

        assert await use_case.execute() is True
        assert await use_case.execute() is False

        admin = await user_repo.find_by_username(Username("root"))
        assert admin.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_skipped_without_credentials(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = EnsureAdminUserUseCase(user_service, AdminSettings(username="root"))

        assert await use_case.execute() is False
