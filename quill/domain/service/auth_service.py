"""Authentication and authorization domain service."""

from typing import Iterable
from uuid import UUID

import logfire

from quill.domain.error import (
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from quill.domain.model import Post, User
from quill.domain.value import UserId, UserRole
from quill.util.jwt import JWTError
from quill.util.password import verify_password

from .base import Service
from .jwt_service import JWTService
from .user_service import UserService


class AuthService(Service):
    """Domain service for credential checks and role/ownership rules."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize auth service.

        Args:
            user_service: User service
            jwt_service: JWT service for issuing and verifying tokens
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def authenticate(self, login: str, password: str) -> tuple[User, str]:
        """Check credentials and issue a token.

        Args:
            login: Username or email
            password: Plaintext password

        Returns:
            Tuple of (user, token)

        Raises:
            InvalidCredentialsError: If no account matches or the password is wrong
        """
        with logfire.span("auth_service.authenticate"):
            user = await self.user_service.find_by_login(login)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Login rejected")
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(user)
            logfire.info("Login succeeded", user_id=str(user.id))
            return user, token

    async def verify(self, token: str | None) -> User:
        """Resolve a bearer token to the user it names.

        Raises:
            UnauthenticatedError: If the token is missing, invalid, expired or
                names a user that no longer exists
        """
        with logfire.span("auth_service.verify"):
            if not token:
                raise UnauthenticatedError("Missing token")

            try:
                payload = self.jwt_service.verify_token(token)
                user_id = UserId(UUID(payload.user_id))
            except (JWTError, ValueError) as e:
                raise UnauthenticatedError(str(e)) from e

            try:
                return await self.user_service.get_by_id(user_id)
            except NotFoundError as e:
                raise UnauthenticatedError("User no longer exists") from e

    def authorize_role(
        self, user: User, allowed_roles: Iterable[UserRole | str], action: str
    ) -> None:
        """Require the user to hold one of the allowed roles.

        Raises:
            NotAuthorizedError: If the user's role is not allowed
        """
        allowed = {UserRole(role) for role in allowed_roles}
        if user.role not in allowed:
            logfire.warn(
                "Role not allowed",
                user_id=str(user.id),
                role=user.role.value,
                action=action,
            )
            raise NotAuthorizedError(action, "role", user.role.value, str(user.id))

    def authorize_post_edit(self, user: User, post: Post, action: str = "edit") -> None:
        """Require the user to own the post or be an admin.

        Raises:
            NotAuthorizedError: If the user is neither author nor admin
        """
        if user.is_admin or post.is_owned_by(user.id):
            return
        logfire.warn(
            "Post edit forbidden",
            user_id=str(user.id),
            post_id=str(post.id),
            action=action,
        )
        raise NotAuthorizedError(action, "post", str(post.id), str(user.id))
