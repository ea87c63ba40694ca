"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import ApiModel
from quill.domain.service import AuthService, PostService, UserService
from quill.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    requester_id: str


class DeletePostResponse(ApiModel):
    """Delete post response."""

    message: str = "Post deleted successfully"


class DeletePostUseCase:
    """Use case for hard-deleting a post. Its slug becomes free again."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the requester is neither author nor admin
        """
        post_id = PostId(UUID(request.post_id))
        requester = await self.user_service.get_by_id(
            UserId(UUID(request.requester_id))
        )

        with logfire.span("delete_post.execute", post_id=str(post_id)):
            post = await self.post_service.get_post_by_id(post_id)
            self.auth_service.authorize_post_edit(requester, post, "delete")
            await self.post_service.delete_post(post_id)
            return DeletePostResponse()
