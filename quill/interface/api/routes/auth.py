"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Security
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from quill.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    UserResponse,
)
from quill.domain.error import InvalidCredentialsError
from quill.interface.api.auth import bearer_scheme, require_user
from quill.interface.api.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in with username (or email) and password."""

    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=1024)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange credentials for a bearer token.

    Raises:
        HTTPException: 401 if the credentials don't match an account
    """
    try:
        return await login_use_case.execute(
            LoginRequest(username=request.username, password=request.password)
        )
    except InvalidCredentialsError as e:
        logfire.info("Login failed")
        raise to_http_exception(e)


@router.get("/me", response_model=UserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> UserResponse:
    """Get the authenticated user.

    Raises:
        HTTPException: 401 if not authenticated
    """
    return await require_user(get_current_user_use_case, credentials)
