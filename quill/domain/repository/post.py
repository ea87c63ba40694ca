"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from quill.domain.error import ValidationError
from quill.domain.model.post import Post
from quill.domain.value import PostId, Slug
from quill.domain.value.common import ValueObject


class PostSortField(str, Enum):
    """Fields a post listing can be ordered by (API names)."""

    PUBLISHED_AT = "publishedAt"
    UPDATED_AT = "updatedAt"
    CREATED_AT = "createdAt"
    TITLE = "title"
    VIEW_COUNT = "viewCount"


class PostSort(ValueObject):
    """Sort field plus direction. Defaults to newest-published first.

    Ties are broken by ``created_at`` in the same direction, then by id.
    """

    field: PostSortField = PostSortField.PUBLISHED_AT
    descending: bool = True

    @classmethod
    def parse(cls, raw: str | None) -> "PostSort":
        """Parse ``-publishedAt`` style sort expressions.

        A leading ``-`` selects descending order. Both the camelCase API name
        and the snake_case name are accepted.

        Raises:
            ValidationError: If the field is not sortable
        """
        if raw is None or not raw.strip():
            return cls()

        raw = raw.strip()
        descending = raw.startswith("-")
        name = raw.lstrip("-+")

        try:
            field = PostSortField(name)
        except ValueError:
            try:
                field = PostSortField[name.upper()]
            except KeyError:
                allowed = ", ".join(f.value for f in PostSortField)
                raise ValidationError(
                    f"Cannot sort by '{name}'. Allowed fields: {allowed}"
                )

        return cls(field=field, descending=descending)


class PostQuery(ValueObject):
    """Typed listing query.

    ``page`` and ``limit`` below 1 are normalized to 1; blank search and
    category strings mean "no filter".
    """

    category: Optional[str] = None
    search: Optional[str] = None
    sort: PostSort = PostSort()
    published_only: bool = True
    page: int = Field(default=1)
    limit: int = Field(default=10)

    @field_validator("page", "limit", mode="before")
    @classmethod
    def at_least_one(cls, v: object) -> object:
        if isinstance(v, int) and v < 1:
            return 1
        return v

    @field_validator("category", "search", mode="before")
    @classmethod
    def blank_is_none(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class CategoryCount(ValueObject):
    """Number of tags of one type across published posts."""

    type: str
    count: int


class PostRepository(ABC):
    """Repository for Post aggregate.

    Implementations must enforce slug uniqueness at write time and raise
    ``SlugConflictError`` on violation.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(
        self, slug: Slug, published_only: bool = True
    ) -> Optional[Post]:
        """Find a post by slug.

        Args:
            slug: The post slug
            published_only: Ignore unpublished posts

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[PostId] = None
    ) -> bool:
        """Check whether any post other than ``exclude_id`` uses a slug.

        Unpublished posts count: slugs are unique across all posts.
        """
        pass

    @abstractmethod
    async def find_all(self, query: PostQuery) -> List[Post]:
        """Find one page of posts matching a query.

        Args:
            query: Filters, sort order and pagination

        Returns:
            Posts on the requested page (empty past the last page)
        """
        pass

    @abstractmethod
    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query's filters (pagination is ignored)."""
        pass

    @abstractmethod
    async def count_tag_types(self, published_only: bool = True) -> List[CategoryCount]:
        """Count tag occurrences grouped by tag type.

        Returns:
            One entry per type that occurs at least once, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Raises:
            SlugConflictError: If another post already holds the slug
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Hard-delete a post.

        Returns:
            True if a post was removed
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1."""
        pass
