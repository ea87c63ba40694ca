"""Update post use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quill.application.usecase.base import to_domain_validation_error
from quill.domain.error import ValidationError
from quill.domain.model import Post
from quill.domain.model.common import utcnow
from quill.domain.service import AuthService, PostService, UserService
from quill.domain.value import PostId, UserId

from .common import PostResponse, TagInfo, to_post_response

# Fields that may be cleared with an explicit null
NULLABLE_FIELDS = {"featured_image"}


class PostChanges(BaseModel):
    """Partial update.

    Only fields that were explicitly set (``model_fields_set``) are applied;
    omitted fields keep their current value.
    """

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    tags: list[TagInfo] | None = None
    featured_image: str | None = None
    is_published: bool | None = None
    published_at: datetime | None = None


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    requester_id: str  # Current user ID (must be author or admin)
    changes: PostChanges


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            auth_service: Authorization rules
        """
        self.post_service = post_service
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        A changed title re-derives the slug; the post's own slug never counts
        as a collision, so an unchanged title keeps it.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the requester is neither author nor admin
            ValidationError: If a required field is nulled or a value is invalid
        """
        post_id = PostId(UUID(request.post_id))
        requester = await self.user_service.get_by_id(
            UserId(UUID(request.requester_id))
        )

        with logfire.span(
            "update_post.execute",
            post_id=str(post_id),
            fields=sorted(request.changes.model_fields_set),
        ):
            post = await self.post_service.get_post_by_id(post_id)
            self.auth_service.authorize_post_edit(requester, post, "update")

            updates = self._collect_updates(request.changes)

            title = updates.get("title")
            if isinstance(title, str) and title.strip() != post.title:
                updates["slug"] = await self.post_service.generate_unique_slug(
                    title, exclude_id=post.id
                )

            updates["updated_at"] = utcnow()

            try:
                updated = Post.model_validate({**post.model_dump(), **updates})
            except PydanticValidationError as e:
                raise to_domain_validation_error(e) from e

            saved = await self.post_service.save_with_unique_slug(updated)
            logfire.info("Post updated", post_id=str(saved.id), slug=saved.slug.root)

            authors = await self.user_service.get_by_ids([saved.author_id])
            return to_post_response(saved, authors.get(saved.author_id))

    @staticmethod
    def _collect_updates(changes: PostChanges) -> dict:
        updates: dict = {}
        for field in changes.model_fields_set:
            value = getattr(changes, field)
            if value is None and field not in NULLABLE_FIELDS:
                raise ValidationError(f"{field}: may not be null")
            if field == "tags":
                value = [tag.to_tag() for tag in value]
            updates[field] = value
        return updates
