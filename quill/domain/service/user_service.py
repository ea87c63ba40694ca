"""User domain service."""

from typing import Iterable
from uuid import uuid4

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId, UserRole, Username
from quill.util.password import hash_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID. Unknown IDs are skipped."""
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def find_by_login(self, login: str) -> User | None:
        """Find a user by username, falling back to email.

        Args:
            login: Username or email address

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_login"):
            login = login.strip()
            if not login:
                return None

            user = None
            if len(login) <= 50:
                user = await self.user_repository.find_by_username(Username(login))
            if user is None and "@" in login:
                user = await self.user_repository.find_by_email(login)

            if user is None:
                logfire.warn("No user matches login")
            return user

    async def create_user(
        self,
        username: str,
        email: str,
        password: str,
        display_name: str,
        role: UserRole = UserRole.READER,
    ) -> User:
        """Create a user with a freshly hashed password.

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.create_user", username=username, role=role.value
        ):
            user = User(
                id=UserId(uuid4()),
                username=Username(username),
                email=email,
                password_hash=hash_password(password),
                role=role,
                display_name=display_name,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User created", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def ensure_user(
        self,
        username: str,
        email: str,
        password: str,
        display_name: str,
        role: UserRole,
    ) -> tuple[User, bool]:
        """Create a user unless one with the username already exists.

        The existing account is left untouched (its password is not reset).

        Returns:
            Tuple of (user, created)
        """
        with logfire.span("user_service.ensure_user", username=username):
            existing = await self.user_repository.find_by_username(Username(username))
            if existing:
                logfire.info("User already exists", username=username)
                return existing, False

            user = await self.create_user(
                username=username,
                email=email,
                password=password,
                display_name=display_name,
                role=role,
            )
            return user, True
