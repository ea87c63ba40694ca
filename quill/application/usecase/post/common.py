"""Shared post response models."""

from datetime import datetime

from pydantic import Field

from quill.application.usecase.base import ApiModel
from quill.domain.model import Post, Tag, TagType, User


class TagInfo(ApiModel):
    """Tag as sent and received over the API."""

    name: str = Field(min_length=1, max_length=50)
    type: TagType

    def to_tag(self) -> Tag:
        return Tag(name=self.name, type=self.type)


class AuthorInfo(ApiModel):
    """Author embedded in post responses."""

    id: str
    username: str
    display_name: str


class PostResponse(ApiModel):
    """Full post document."""

    id: str
    title: str
    slug: str
    content: str
    excerpt: str
    author: AuthorInfo | None
    tags: list[TagInfo]
    featured_image: str | None
    is_published: bool
    view_count: int
    published_at: datetime
    created_at: datetime
    updated_at: datetime


class PostListItem(PostResponse):
    """Post as it appears in listings.

    ``date`` and ``preview`` mirror ``published_at`` and ``excerpt`` for
    clients that render cards.
    """

    date: datetime
    preview: str


def author_info(user: User | None) -> AuthorInfo | None:
    if user is None:
        return None
    return AuthorInfo(
        id=str(user.id),
        username=user.username.root,
        display_name=user.display_name,
    )


def post_fields(post: Post, author: User | None) -> dict:
    """Response fields shared by every post view."""
    return {
        "id": str(post.id),
        "title": post.title,
        "slug": post.slug.root,
        "content": post.content,
        "excerpt": post.excerpt,
        "author": author_info(author),
        "tags": [TagInfo(name=t.name, type=t.type) for t in post.tags],
        "featured_image": post.featured_image,
        "is_published": post.is_published,
        "view_count": post.view_count,
        "published_at": post.published_at,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def to_post_response(post: Post, author: User | None) -> PostResponse:
    return PostResponse(**post_fields(post, author))


def to_post_list_item(post: Post, author: User | None) -> PostListItem:
    return PostListItem(
        **post_fields(post, author),
        date=post.published_at,
        preview=post.excerpt,
    )
