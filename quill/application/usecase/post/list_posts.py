"""List posts use case."""

import math

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import ApiModel
from quill.config import PaginationSettings
from quill.domain.repository import PostQuery, PostSort
from quill.domain.service import PostService, UserService

from .common import PostListItem, to_post_list_item


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = 1
    limit: int | None = None  # None uses the configured default
    category: str | None = None
    search: str | None = None
    sort: str | None = None  # e.g. "-publishedAt", "title"


class ListPostsResponse(ApiModel):
    """One page of published posts."""

    posts: list[PostListItem]
    total_pages: int
    current_page: int
    total_posts: int


class ListPostsUseCase:
    """Use case for the public, paginated post listing."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            pagination_settings: Default and maximum page size
        """
        self.post_service = post_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            ValidationError: If the sort field is unknown
        """
        limit = request.limit
        if limit is None:
            limit = self.pagination_settings.default_limit
        limit = min(max(limit, 1), self.pagination_settings.max_limit)

        query = PostQuery(
            category=request.category,
            search=request.search,
            sort=PostSort.parse(request.sort),
            published_only=True,
            page=request.page,
            limit=limit,
        )

        with logfire.span("list_posts.execute", page=query.page, limit=query.limit):
            posts, total = await self.post_service.find_posts(query)
            authors = await self.user_service.get_by_ids(p.author_id for p in posts)

            return ListPostsResponse(
                posts=[to_post_list_item(p, authors.get(p.author_id)) for p in posts],
                total_pages=math.ceil(total / query.limit),
                current_page=query.page,
                total_posts=total,
            )
