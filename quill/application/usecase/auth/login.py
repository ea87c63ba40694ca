"""Login use case."""

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import ApiModel
from quill.domain.service import AuthService

from .common import UserResponse


class LoginRequest(BaseModel):
    """Login request.

    ``username`` may also hold the account's email address.
    """

    username: str
    password: str


class LoginResponse(ApiModel):
    """Login response."""

    token: str
    user: UserResponse


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a bearer token.

        Raises:
            InvalidCredentialsError: If the login or password is wrong
        """
        with logfire.span("login.execute"):
            user, token = await self.auth_service.authenticate(
                request.username, request.password
            )
            return LoginResponse(token=token, user=UserResponse.from_user(user))
