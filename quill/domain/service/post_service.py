"""Post domain service."""

import logfire

from quill.config import SlugSettings
from quill.domain.error import NotFoundError, SlugConflictError, SlugExhaustedError
from quill.domain.model.post import Post
from quill.domain.repository import PostQuery, PostRepository
from quill.domain.service.slug import FALLBACK_SLUG, slugify, with_suffix
from quill.domain.value import PostId, Slug

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, slug_settings: SlugSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            slug_settings: Slug length and collision limits
        """
        self.post_repository = post_repository
        self.slug_settings = slug_settings

    async def generate_unique_slug(
        self, title: str, exclude_id: PostId | None = None
    ) -> Slug:
        """Generate a unique slug from a title.

        Collisions are resolved by appending ``-1``, ``-2``, ... to the
        original candidate. The post identified by ``exclude_id`` never
        counts as a collision, so renaming a post to its current title keeps
        its slug.

        Args:
            title: Post title to slugify
            exclude_id: Post being renamed (None when creating)

        Returns:
            Slug that was free at the moment of the check

        Raises:
            SlugExhaustedError: If ``max_attempts`` candidates are all taken
        """
        with logfire.span(
            "post_service.generate_unique_slug",
            title=title,
            exclude_id=str(exclude_id) if exclude_id else None,
        ):
            max_length = self.slug_settings.max_length
            base_slug = slugify(title, max_length) or FALLBACK_SLUG

            candidate = base_slug
            for attempt in range(self.slug_settings.max_attempts):
                if attempt:
                    candidate = with_suffix(base_slug, attempt, max_length)

                if not await self.post_repository.slug_exists(
                    Slug(candidate), exclude_id=exclude_id
                ):
                    logfire.info(
                        "Generated unique slug",
                        slug=candidate,
                        had_collision=attempt > 0,
                    )
                    return Slug(candidate)

                logfire.debug(
                    "Slug collision, trying with suffix",
                    base_slug=base_slug,
                    attempt=candidate,
                )

            logfire.error(
                "Slug attempts exhausted",
                base_slug=base_slug,
                attempts=self.slug_settings.max_attempts,
            )
            raise SlugExhaustedError(base_slug, self.slug_settings.max_attempts)

    async def save_with_unique_slug(self, post: Post) -> Post:
        """Save a post, re-deriving its slug if a concurrent writer claimed it.

        The uniqueness probe and the write are not atomic; the repository's
        unique constraint catches the race and this retries with the next
        free candidate.

        Raises:
            SlugExhaustedError: If conflicts persist past ``max_attempts``
        """
        with logfire.span(
            "post_service.save_with_unique_slug",
            post_id=str(post.id),
            slug=str(post.slug),
        ):
            for _ in range(self.slug_settings.max_attempts):
                try:
                    saved = await self.post_repository.save(post)
                    logfire.info(
                        "Post saved", post_id=str(saved.id), slug=str(saved.slug)
                    )
                    return saved
                except SlugConflictError as e:
                    logfire.warn(
                        "Slug claimed concurrently, regenerating",
                        post_id=str(post.id),
                        slug=e.slug,
                    )
                    slug = await self.generate_unique_slug(
                        post.title, exclude_id=post.id
                    )
                    post = post.model_copy(update={"slug": slug})

            raise SlugExhaustedError(str(post.slug), self.slug_settings.max_attempts)

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def view_post(self, slug: Slug, published_only: bool = True) -> Post:
        """Read a post by slug and count the view.

        Returns:
            The post as read, before the increment

        Raises:
            NotFoundError: If no (published) post has the slug
        """
        with logfire.span("post_service.view_post", slug=str(slug)):
            post = await self.post_repository.find_by_slug(
                slug, published_only=published_only
            )
            if post is None:
                logfire.warn("Post not found by slug", slug=str(slug))
                raise NotFoundError("Post", str(slug))

            await self.post_repository.increment_view_count(post.id)
            return post

    async def find_posts(self, query: PostQuery) -> tuple[list[Post], int]:
        """Find one page of posts and the total number of matches."""
        with logfire.span(
            "post_service.find_posts",
            category=query.category,
            search=query.search,
            sort=query.sort.field.value,
            descending=query.sort.descending,
            page=query.page,
            limit=query.limit,
        ):
            total = await self.post_repository.count(query)
            posts = await self.post_repository.find_all(query) if total else []
            logfire.info("Posts found", count=len(posts), total=total)
            return posts, total

    async def delete_post(self, post_id: PostId) -> None:
        """Hard-delete a post.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))
