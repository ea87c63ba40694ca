"""Get current user use case."""

from pydantic import BaseModel

from quill.domain.service import AuthService

from .common import UserResponse


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Bearer token, None when the header is missing


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to its user."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the token is missing, invalid, expired or
                the user no longer exists
        """
        user = await self.auth_service.verify(request.token)
        return UserResponse.from_user(user)
