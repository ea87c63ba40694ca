"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, List
from uuid import UUID

from quill.domain.model import ContactMessage, Post, Tag, TagType, User
from quill.domain.value import (
    ContactMessageId,
    PostId,
    Slug,
    UserId,
    UserRole,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        display_name=row["display_name"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "display_name": user.display_name,
        "created_at": user.created_at,
    }


def rows_to_tags(rows: Iterable[Dict[str, Any]]) -> List[Tag]:
    """Convert post_tags rows to tags, ordered by position."""
    ordered = sorted(rows, key=lambda r: r["position"])
    return [Tag(name=r["name"], type=TagType(r["type"])) for r in ordered]


def row_to_post(row: Dict[str, Any], tags: List[Tag]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: Tags of the post, already in order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        content=row["content"],
        excerpt=row["excerpt"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=tags,
        featured_image=row.get("featured_image"),
        is_published=row["is_published"],
        view_count=row["view_count"],
        published_at=row["published_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Tags are excluded; they live in the post_tags table.
    """
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug.root,
        "content": post.content,
        "excerpt": post.excerpt,
        "author_id": post.author_id,
        "featured_image": post.featured_image,
        "is_published": post.is_published,
        "view_count": post.view_count,
        "published_at": post.published_at,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def post_tags_to_rows(post: Post) -> List[Dict[str, Any]]:
    """Convert a post's tags to post_tags rows."""
    return [
        {
            "post_id": post.id,
            "position": position,
            "name": tag.name,
            "type": tag.type.value,
        }
        for position, tag in enumerate(post.tags)
    ]


def row_to_contact_message(row: Dict[str, Any]) -> ContactMessage:
    """Convert database row to ContactMessage domain model."""
    return ContactMessage(
        id=ContactMessageId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        subject=row["subject"],
        message=row["message"],
        ip_address=row.get("ip_address"),
        user_agent=row.get("user_agent"),
        is_read=row["is_read"],
        is_replied=row["is_replied"],
        created_at=row["created_at"],
    )


def contact_message_to_dict(message: ContactMessage) -> Dict[str, Any]:
    """Convert ContactMessage domain model to database dict."""
    return {
        "id": message.id,
        "name": message.name,
        "email": str(message.email),
        "subject": message.subject,
        "message": message.message,
        "ip_address": message.ip_address,
        "user_agent": message.user_agent,
        "is_read": message.is_read,
        "is_replied": message.is_replied,
        "created_at": message.created_at,
    }
