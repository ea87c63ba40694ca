"""Repository interfaces.

Interfaces live in the domain layer (dependency inversion); implementations
live in the persistence layer.
"""

from quill.domain.repository.contact import ContactMessageRepository
from quill.domain.repository.post import (
    CategoryCount,
    PostQuery,
    PostRepository,
    PostSort,
    PostSortField,
)
from quill.domain.repository.user import UserRepository

__all__ = [
    "CategoryCount",
    "ContactMessageRepository",
    "PostQuery",
    "PostRepository",
    "PostSort",
    "PostSortField",
    "UserRepository",
]
