"""PostgreSQL repository implementations."""

from quill.persistence.repository.contact import PostgresContactMessageRepository
from quill.persistence.repository.post import PostgresPostRepository
from quill.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresContactMessageRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
]
