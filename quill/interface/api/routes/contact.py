"""Contact form routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from quill.application.usecase.auth import GetCurrentUserUseCase
from quill.application.usecase.contact import (
    ContactMessageResponse,
    ListMessagesRequest,
    ListMessagesResponse,
    ListMessagesUseCase,
    MarkMessageReadUseCase,
    MarkMessageRepliedUseCase,
    MarkMessageRequest,
    SubmitContactMessageRequest,
    SubmitContactMessageResponse,
    SubmitContactMessageUseCase,
)
from quill.domain.error import DomainError
from quill.interface.api.auth import bearer_scheme, require_user
from quill.interface.api.errors import to_http_exception

router = APIRouter(prefix="/contact", tags=["contact"], route_class=DishkaRoute)


class ContactAPIRequest(BaseModel):
    """API request for the public contact form."""

    name: str
    email: str
    subject: str
    message: str


@router.post(
    "",
    response_model=SubmitContactMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_message(
    body: ContactAPIRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    submit_use_case: FromDishka[SubmitContactMessageUseCase],
) -> SubmitContactMessageResponse:
    """Submit the contact form.

    The message is stored before responding; notification emails are sent
    in the background after the response.

    Raises:
        HTTPException: 400 if a field is missing, too long or malformed
    """
    try:
        return await submit_use_case.execute(
            SubmitContactMessageRequest(
                name=body.name,
                email=body.email,
                subject=body.subject,
                message=body.message,
                ip_address=request.client.host if request.client else None,
                user_agent=request.headers.get("user-agent"),
            ),
            schedule=background_tasks.add_task,
        )
    except DomainError as e:
        logfire.info("Contact submission rejected", error=str(e))
        raise to_http_exception(e)


@router.get("", response_model=ListMessagesResponse)
async def list_messages(
    list_use_case: FromDishka[ListMessagesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = 1,
    limit: int | None = None,
    unread: bool = False,
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ListMessagesResponse:
    """List contact messages, newest first. Admin only.

    Args:
        page: 1-indexed page number
        limit: Page size
        unread: Only messages not yet marked read
    """
    user = await require_user(get_current_user_use_case, credentials)

    try:
        return await list_use_case.execute(
            ListMessagesRequest(
                requester_id=user.id, page=page, limit=limit, unread_only=unread
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{message_id}/read", response_model=ContactMessageResponse)
async def mark_read(
    message_id: UUID,
    mark_read_use_case: FromDishka[MarkMessageReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ContactMessageResponse:
    """Mark a message as read. Admin only."""
    user = await require_user(get_current_user_use_case, credentials)

    try:
        return await mark_read_use_case.execute(
            MarkMessageRequest(message_id=str(message_id), requester_id=user.id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{message_id}/replied", response_model=ContactMessageResponse)
async def mark_replied(
    message_id: UUID,
    mark_replied_use_case: FromDishka[MarkMessageRepliedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ContactMessageResponse:
    """Mark a message as replied. Admin only."""
    user = await require_user(get_current_user_use_case, credentials)

    try:
        return await mark_replied_use_case.execute(
            MarkMessageRequest(message_id=str(message_id), requester_id=user.id)
        )
    except DomainError as e:
        raise to_http_exception(e)
