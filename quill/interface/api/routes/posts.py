"""Post routes."""

from datetime import datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Security, status
from fastapi.security import HTTPAuthorizationCredentials

from quill.application.usecase.auth import GetCurrentUserUseCase
from quill.application.usecase.base import ApiModel
from quill.application.usecase.post import (
    CategoryResponse,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListCategoriesUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostChanges,
    PostResponse,
    TagInfo,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from quill.domain.error import DomainError
from quill.interface.api.auth import bearer_scheme, require_user
from quill.interface.api.errors import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(ApiModel):
    """API request for creating a post."""

    title: str
    content: str
    excerpt: str
    tags: list[TagInfo] = []
    featured_image: str | None = None
    is_published: bool = True
    published_at: datetime | None = None


class UpdatePostAPIRequest(ApiModel):
    """API request for updating a post.

    Omitted fields are left unchanged.
    """

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    tags: list[TagInfo] | None = None
    featured_image: str | None = None
    is_published: bool | None = None
    published_at: datetime | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = 1,
    limit: int | None = None,
    category: str | None = None,
    search: str | None = None,
    sort: str | None = None,
) -> ListPostsResponse:
    """List published posts.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-indexed page number
        limit: Page size (clamped to the configured maximum)
        category: Only posts with a tag of this type
        search: Case-insensitive text matched against title, content and excerpt
        sort: Sort field, prefix with "-" for descending (default -publishedAt)

    Returns:
        One page of posts with pagination totals
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                page=page,
                limit=limit,
                category=category,
                search=search,
                sort=sort,
            )
        )
    except DomainError as e:
        logfire.warn("Post listing rejected", error=str(e))
        raise to_http_exception(e)


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> list[CategoryResponse]:
    """List tag types used by published posts, most used first."""
    return await list_categories_use_case.execute()


@router.get("/{slug}", response_model=PostResponse)
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a published post by slug. Counts one view.

    Raises:
        HTTPException: 404 if no published post has the slug
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(slug=slug))
    except DomainError as e:
        raise to_http_exception(e)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> PostResponse:
    """Create a new post.

    Requires authentication with a role allowed to publish.

    Raises:
        HTTPException: 401 if not authenticated, 403 if the role may not
            create posts, 400 if validation fails
    """
    user = await require_user(get_current_user_use_case, credentials)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump(), requester_id=user.id)
        )
    except DomainError as e:
        logfire.warn("Post creation rejected", error=str(e))
        raise to_http_exception(e)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> PostResponse:
    """Update a post. Only the author or an admin may do this.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not author or admin,
            404 if the post doesn't exist, 400 if validation fails
    """
    user = await require_user(get_current_user_use_case, credentials)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                requester_id=user.id,
                changes=PostChanges(**request.model_dump(exclude_unset=True)),
            )
        )
    except DomainError as e:
        logfire.warn("Post update rejected", post_id=str(post_id), error=str(e))
        raise to_http_exception(e)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> DeletePostResponse:
    """Delete a post. Only the author or an admin may do this.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not author or admin,
            404 if the post doesn't exist
    """
    user = await require_user(get_current_user_use_case, credentials)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), requester_id=user.id)
        )
    except DomainError as e:
        logfire.warn("Post deletion rejected", post_id=str(post_id), error=str(e))
        raise to_http_exception(e)
