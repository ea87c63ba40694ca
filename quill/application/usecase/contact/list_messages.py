"""List contact messages use case."""

import math
from uuid import UUID

from pydantic import BaseModel

from quill.application.usecase.base import ApiModel
from quill.config import PaginationSettings
from quill.domain.service import AuthService, ContactService, UserService
from quill.domain.value import UserId, UserRole

from .common import ContactMessageResponse


class ListMessagesRequest(BaseModel):
    """List messages request."""

    requester_id: str
    page: int = 1
    limit: int | None = None
    unread_only: bool = False


class ListMessagesResponse(ApiModel):
    """One page of the contact inbox."""

    messages: list[ContactMessageResponse]
    total_pages: int
    current_page: int
    total_messages: int


class ListMessagesUseCase:
    """Use case for the admin contact inbox."""

    def __init__(
        self,
        contact_service: ContactService,
        user_service: UserService,
        auth_service: AuthService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.contact_service = contact_service
        self.user_service = user_service
        self.auth_service = auth_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListMessagesRequest) -> ListMessagesResponse:
        """List messages newest first.

        Raises:
            NotAuthorizedError: If the requester is not an admin
        """
        requester = await self.user_service.get_by_id(
            UserId(UUID(request.requester_id))
        )
        self.auth_service.authorize_role(requester, [UserRole.ADMIN], "list messages")

        page = max(request.page, 1)
        limit = request.limit
        if limit is None:
            limit = self.pagination_settings.contact_default_limit
        limit = min(max(limit, 1), self.pagination_settings.max_limit)

        messages, total = await self.contact_service.list_messages(
            page=page, limit=limit, unread_only=request.unread_only
        )
        return ListMessagesResponse(
            messages=[ContactMessageResponse.from_message(m) for m in messages],
            total_pages=math.ceil(total / limit),
            current_page=page,
            total_messages=total,
        )
