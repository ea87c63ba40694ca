"""Bearer token authentication for routes."""

from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quill.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserResponse,
)
from quill.domain.error import UnauthenticatedError
from quill.interface.api.errors import to_http_exception

# auto_error=False so a missing header reaches our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    credentials: HTTPAuthorizationCredentials | None,
) -> UserResponse:
    """Resolve the request's bearer token to a user.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = credentials.credentials if credentials else None
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except UnauthenticatedError as e:
        raise to_http_exception(e) from e
