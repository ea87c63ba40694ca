"""Mark contact message read/replied use cases."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import AuthService, ContactService, UserService
from quill.domain.value import ContactMessageId, UserId, UserRole

from .common import ContactMessageResponse


class MarkMessageRequest(BaseModel):
    """Mark message request."""

    message_id: str
    requester_id: str


class _MarkMessageUseCase:
    def __init__(
        self,
        contact_service: ContactService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> None:
        self.contact_service = contact_service
        self.user_service = user_service
        self.auth_service = auth_service

    async def _authorize(self, request: MarkMessageRequest, action: str) -> None:
        requester = await self.user_service.get_by_id(
            UserId(UUID(request.requester_id))
        )
        self.auth_service.authorize_role(requester, [UserRole.ADMIN], action)


class MarkMessageReadUseCase(_MarkMessageUseCase):
    """Use case for flagging a message as read."""

    async def execute(self, request: MarkMessageRequest) -> ContactMessageResponse:
        """Set ``is_read``; ``is_replied`` is unchanged.

        Raises:
            NotAuthorizedError: If the requester is not an admin
            NotFoundError: If the message doesn't exist
        """
        await self._authorize(request, "mark read")
        message = await self.contact_service.mark_read(
            ContactMessageId(UUID(request.message_id))
        )
        return ContactMessageResponse.from_message(message)


class MarkMessageRepliedUseCase(_MarkMessageUseCase):
    """Use case for flagging a message as replied."""

    async def execute(self, request: MarkMessageRequest) -> ContactMessageResponse:
        """Set ``is_replied``; ``is_read`` is unchanged.

        Raises:
            NotAuthorizedError: If the requester is not an admin
            NotFoundError: If the message doesn't exist
        """
        await self._authorize(request, "mark replied")
        message = await self.contact_service.mark_replied(
            ContactMessageId(UUID(request.message_id))
        )
        return ContactMessageResponse.from_message(message)
