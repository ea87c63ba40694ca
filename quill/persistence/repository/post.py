"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, exists, func, insert, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.error import SlugConflictError
from quill.domain.model import Post, Tag
from quill.domain.repository.post import (
    CategoryCount,
    PostQuery,
    PostRepository,
    PostSortField,
)
from quill.domain.value import PostId, Slug
from quill.persistence.mappers import (
    post_tags_to_rows,
    post_to_dict,
    row_to_post,
    rows_to_tags,
)
from quill.persistence.tables import post_tags_table, posts_table

SLUG_INDEX_NAME = "uq_posts_slug"

SORT_COLUMNS = {
    PostSortField.PUBLISHED_AT: posts_table.c.published_at,
    PostSortField.UPDATED_AT: posts_table.c.updated_at,
    PostSortField.CREATED_AT: posts_table.c.created_at,
    PostSortField.TITLE: posts_table.c.title,
    PostSortField.VIEW_COUNT: posts_table.c.view_count,
}


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[Tag]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> ordered tags
        """
        if not post_ids:
            return {}

        stmt = select(post_tags_table).where(post_tags_table.c.post_id.in_(post_ids))
        result = await self.session.execute(stmt)

        rows_by_post: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        for row in result.mappings():
            rows_by_post[row["post_id"]].append(dict(row))

        return {post_id: rows_to_tags(rows) for post_id, rows in rows_by_post.items()}

    async def _rows_to_posts(self, rows: list[Any]) -> List[Post]:
        post_tag_map = await self._fetch_tags_for_posts([row["id"] for row in rows])
        return [
            row_to_post(dict(row), tags=post_tag_map.get(row["id"], [])) for row in rows
        ]

    def _filters(self, query: PostQuery) -> list[Any]:
        """Build WHERE clauses for a listing query."""
        clauses: list[Any] = []

        if query.published_only:
            clauses.append(posts_table.c.is_published.is_(True))

        if query.category:
            clauses.append(
                exists().where(
                    post_tags_table.c.post_id == posts_table.c.id,
                    post_tags_table.c.type == query.category,
                )
            )

        if query.search:
            pattern = f"%{escape_like(query.search)}%"
            clauses.append(
                or_(
                    posts_table.c.title.ilike(pattern, escape="\\"),
                    posts_table.c.content.ilike(pattern, escape="\\"),
                    posts_table.c.excerpt.ilike(pattern, escape="\\"),
                )
            )

        return clauses

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            posts = await self._rows_to_posts([row])
            return posts[0]

    async def find_by_slug(
        self, slug: Slug, published_only: bool = True
    ) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == slug.root)
            if published_only:
                stmt = stmt.where(posts_table.c.is_published.is_(True))

            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            posts = await self._rows_to_posts([row])
            return posts[0]

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[PostId] = None
    ) -> bool:
        """Check if a slug is held by any post other than ``exclude_id``."""
        stmt = select(func.count()).select_from(posts_table)
        stmt = stmt.where(posts_table.c.slug == slug.root)
        if exclude_id is not None:
            stmt = stmt.where(posts_table.c.id != exclude_id)

        result = await self.session.execute(stmt)
        exists_ = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=slug.root, exists=exists_)
        return exists_

    async def find_all(self, query: PostQuery) -> List[Post]:
        """Find one page of posts matching a query."""
        with logfire.span(
            "post_repository.find_all",
            category=query.category,
            search=query.search,
            sort=query.sort.field.value,
            descending=query.sort.descending,
            limit=query.limit,
            offset=query.offset,
        ):
            direction = desc if query.sort.descending else asc
            stmt = (
                select(posts_table)
                .where(*self._filters(query))
                .order_by(
                    direction(SORT_COLUMNS[query.sort.field]),
                    direction(posts_table.c.created_at),
                    asc(posts_table.c.id),
                )
                .limit(query.limit)
                .offset(query.offset)
            )

            result = await self.session.execute(stmt)
            rows = list(result.mappings())

            posts = await self._rows_to_posts(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query's filters."""
        with logfire.span("post_repository.count"):
            stmt = (
                select(func.count())
                .select_from(posts_table)
                .where(*self._filters(query))
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def count_tag_types(self, published_only: bool = True) -> List[CategoryCount]:
        """Count tag occurrences grouped by type."""
        with logfire.span("post_repository.count_tag_types"):
            stmt = select(
                post_tags_table.c.type, func.count().label("count")
            ).select_from(
                post_tags_table.join(
                    posts_table, post_tags_table.c.post_id == posts_table.c.id
                )
            )
            if published_only:
                stmt = stmt.where(posts_table.c.is_published.is_(True))
            stmt = stmt.group_by(post_tags_table.c.type)

            result = await self.session.execute(stmt)
            return [
                CategoryCount(type=row["type"], count=row["count"])
                for row in result.mappings()
            ]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        The write runs in a SAVEPOINT so a slug conflict leaves the request
        transaction usable for a retry.
        """
        with logfire.span(
            "post_repository.save", post_id=str(post.id), slug=post.slug.root
        ):
            post_dict = post_to_dict(post)

            try:
                async with self.session.begin_nested():
                    existing = await self.session.execute(
                        select(posts_table.c.id).where(posts_table.c.id == post.id)
                    )
                    if existing.first():
                        await self.session.execute(
                            posts_table.update()
                            .where(posts_table.c.id == post.id)
                            .values(**post_dict)
                        )
                        await self.session.execute(
                            delete(post_tags_table).where(
                                post_tags_table.c.post_id == post.id
                            )
                        )
                    else:
                        await self.session.execute(
                            posts_table.insert().values(**post_dict)
                        )

                    tag_rows = post_tags_to_rows(post)
                    if tag_rows:
                        await self.session.execute(insert(post_tags_table), tag_rows)
            except IntegrityError as e:
                if SLUG_INDEX_NAME in str(e.orig):
                    logfire.warn("Slug unique index violated", slug=post.slug.root)
                    raise SlugConflictError(post.slug.root) from e
                raise

            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete). Tags cascade."""
        stmt = (
            posts_table.delete()
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(view_count=posts_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
