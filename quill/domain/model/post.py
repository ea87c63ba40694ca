"""Post aggregate root.

Posts are the primary content of the blog. Each post is addressed publicly by
its slug, which is derived from the title and unique across all posts.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from quill.domain.model.common import DomainModel, utcnow
from quill.domain.model.tag import Tag
from quill.domain.value import PostId, Slug, UserId

EXCERPT_MAX_LENGTH = 200


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    content: str = Field(min_length=1)
    excerpt: str = Field(min_length=1, max_length=EXCERPT_MAX_LENGTH)
    author_id: UserId
    tags: list[Tag] = Field(default_factory=list)
    featured_image: Optional[str] = None
    is_published: bool = True
    view_count: int = Field(default=0, ge=0)
    published_at: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("title", "excerpt", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id
