"""Shared auth response models."""

from datetime import datetime

from quill.application.usecase.base import ApiModel
from quill.domain.model import User
from quill.domain.value import UserRole


class UserResponse(ApiModel):
    """Public view of an account (never includes the password hash)."""

    id: str
    username: str
    email: str
    role: UserRole
    display_name: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email,
            role=user.role,
            display_name=user.display_name,
            created_at=user.created_at,
        )
