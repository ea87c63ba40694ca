"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from quill.domain.model import Post, Tag, TagType, User
from quill.domain.service.slug import slugify
from quill.domain.value import PostId, Slug, UserId, UserRole, Username

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_user(
    role: UserRole = UserRole.AUTHOR,
    username: str | None = None,
    password_hash: str = "not-a-real-hash",
) -> User:
    """Build a user without hashing a password (fast, but cannot log in)."""
    username = username or f"user-{uuid4().hex[:8]}"
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        password_hash=password_hash,
        role=role,
        display_name=username.title(),
    )


def make_post(
    author_id: UserId,
    title: str = "Hello World",
    tags: list[tuple[str, TagType]] | None = None,
    days: int = 0,
    **overrides,
) -> Post:
    """Build a post whose slug is the slugified title.

    ``days`` offsets published/created/updated timestamps from a fixed base.
    """
    timestamp = BASE_TIME + timedelta(days=days)
    fields = {
        "id": PostId(uuid4()),
        "title": title,
        "slug": Slug(slugify(title)),
        "content": f"Content of {title}",
        "excerpt": f"Excerpt of {title}",
        "author_id": author_id,
        "tags": [Tag(name=name, type=type_) for name, type_ in tags or []],
        "published_at": timestamp,
        "created_at": timestamp,
        "updated_at": timestamp,
    }
    fields.update(overrides)
    return Post(**fields)
