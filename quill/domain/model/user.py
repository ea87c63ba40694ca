"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from quill.domain.model.common import DomainModel, utcnow
from quill.domain.value import UserId, UserRole, Username


class User(DomainModel):
    """Blog account.

    The password is only ever held as a bcrypt hash.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str
    role: UserRole = UserRole.READER
    display_name: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
