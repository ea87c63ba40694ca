"""Domain value objects."""

from quill.domain.value.identifiers import ContactMessageId, PostId, UserId
from quill.domain.value.types import Slug, UserRole, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "ContactMessageId",
    # Types
    "Slug",
    "UserRole",
    "Username",
]
