"""Create post use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quill.application.usecase.base import to_domain_validation_error
from quill.config import AuthSettings
from quill.domain.model import Post
from quill.domain.model.common import utcnow
from quill.domain.service import AuthService, PostService, UserService
from quill.domain.value import PostId, UserId

from .common import PostResponse, TagInfo, to_post_response


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    excerpt: str
    tags: list[TagInfo] = []
    featured_image: str | None = None
    is_published: bool = True
    published_at: datetime | None = None
    requester_id: str  # User ID from authenticated user


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        auth_service: AuthService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            auth_service: Authorization rules
            auth_settings: Roles allowed to create posts
        """
        self.post_service = post_service
        self.user_service = user_service
        self.auth_service = auth_service
        self.auth_settings = auth_settings

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Load the requester and check their role
        2. Generate unique slug from title
        3. Build the Post entity (validation happens in domain model)
        4. Save, regenerating the slug if a concurrent writer took it

        Raises:
            NotAuthorizedError: If the requester's role may not create posts
            ValidationError: If a field is missing or invalid
            SlugExhaustedError: If no free slug could be found
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.requester_id)))

        with logfire.span(
            "create_post.execute", title=request.title, author_id=str(author.id)
        ):
            self.auth_service.authorize_role(
                author, self.auth_settings.post_creator_roles, "create"
            )

            slug = await self.post_service.generate_unique_slug(request.title)

            now = utcnow()
            try:
                post = Post(
                    id=PostId(uuid4()),
                    title=request.title,
                    slug=slug,
                    content=request.content,
                    excerpt=request.excerpt,
                    author_id=author.id,
                    tags=[tag.to_tag() for tag in request.tags],
                    featured_image=request.featured_image,
                    is_published=request.is_published,
                    published_at=request.published_at or now,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError as e:
                raise to_domain_validation_error(e) from e

            saved = await self.post_service.save_with_unique_slug(post)

            logfire.info(
                "Post created successfully",
                post_id=str(saved.id),
                slug=saved.slug.root,
            )
            return to_post_response(saved, author)
