"""In-memory post repository for testing."""

from collections import Counter
from typing import List, Optional

from quill.domain.error import SlugConflictError
from quill.domain.model.post import Post
from quill.domain.repository.post import (
    CategoryCount,
    PostQuery,
    PostRepository,
    PostSortField,
)
from quill.domain.value import PostId, Slug

from .store import InMemoryStore

SORT_KEYS = {
    PostSortField.PUBLISHED_AT: lambda p: p.published_at,
    PostSortField.UPDATED_AT: lambda p: p.updated_at,
    PostSortField.CREATED_AT: lambda p: p.created_at,
    PostSortField.TITLE: lambda p: p.title,
    PostSortField.VIEW_COUNT: lambda p: p.view_count,
}


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Enforces slug uniqueness on save like the database's unique index.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._posts = (store or InMemoryStore()).posts

    def _matching(self, query: PostQuery) -> list[Post]:
        posts = list(self._posts.values())

        if query.published_only:
            posts = [p for p in posts if p.is_published]

        if query.category:
            posts = [
                p for p in posts if any(t.type.value == query.category for t in p.tags)
            ]

        if query.search:
            needle = query.search.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower()
                or needle in p.content.lower()
                or needle in p.excerpt.lower()
            ]

        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(
        self, slug: Slug, published_only: bool = True
    ) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._posts.values():
            if post.slug == slug and (post.is_published or not published_only):
                return post
        return None

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[PostId] = None
    ) -> bool:
        """Check if a slug is held by any post other than ``exclude_id``."""
        return any(
            post.slug == slug and post.id != exclude_id
            for post in self._posts.values()
        )

    async def find_all(self, query: PostQuery) -> List[Post]:
        """Find one page of posts matching a query."""
        sort_key = SORT_KEYS[query.sort.field]

        # Stable sorts: id ascending is the last tie-break, applied first
        posts = sorted(self._matching(query), key=lambda p: str(p.id))
        posts.sort(
            key=lambda p: (sort_key(p), p.created_at),
            reverse=query.sort.descending,
        )

        return posts[query.offset : query.offset + query.limit]

    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query's filters."""
        return len(self._matching(query))

    async def count_tag_types(self, published_only: bool = True) -> List[CategoryCount]:
        """Count tag occurrences grouped by type."""
        counts: Counter[str] = Counter()
        for post in self._posts.values():
            if published_only and not post.is_published:
                continue
            counts.update(tag.type.value for tag in post.tags)
        return [CategoryCount(type=t, count=c) for t, c in counts.items()]

    async def save(self, post: Post) -> Post:
        """Save or update a post.

        Raises:
            SlugConflictError: If another post holds the slug
        """
        if await self.slug_exists(post.slug, exclude_id=post.id):
            raise SlugConflictError(post.slug.root)
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def increment_view_count(self, post_id: PostId) -> None:
        """Increment the view counter by 1."""
        post = self._posts.get(post_id)
        if post is not None:
            self._posts[post_id] = post.model_copy(
                update={"view_count": post.view_count + 1}
            )
