"""Domain model entities."""

from quill.domain.model.contact import ContactMessage
from quill.domain.model.post import Post
from quill.domain.model.tag import Tag, TagType
from quill.domain.model.user import User

__all__ = [
    "ContactMessage",
    "Post",
    "Tag",
    "TagType",
    "User",
]
