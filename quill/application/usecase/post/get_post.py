"""Get post use case."""

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.service import PostService, UserService
from quill.domain.value import Slug

from .common import PostResponse, to_post_response


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str


class GetPostUseCase:
    """Use case for reading a published post by slug.

    Each successful read counts one view.
    """

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Returns:
            The post as read, before its view was counted

        Raises:
            NotFoundError: If no published post has the slug
        """
        try:
            slug = Slug(request.slug)
        except ValueError:
            # Malformed slugs can't match any post
            raise NotFoundError("Post", request.slug)

        post = await self.post_service.view_post(slug)
        authors = await self.user_service.get_by_ids([post.author_id])
        return to_post_response(post, authors.get(post.author_id))
