"""Shared state for in-memory repositories."""

from dataclasses import dataclass, field

from quill.domain.model import ContactMessage, Post, User
from quill.domain.value import ContactMessageId, PostId, UserId


@dataclass
class InMemoryStore:
    """Backing dicts shared by all in-memory repositories of one container.

    Repositories are request-scoped, the store lives as long as the
    container, so data written in one request is visible to the next.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    contact_messages: dict[ContactMessageId, ContactMessage] = field(
        default_factory=dict
    )
