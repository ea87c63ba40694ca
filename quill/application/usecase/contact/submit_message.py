"""Submit contact message use case."""

from typing import Any, Callable

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from quill.application.usecase.base import ApiModel, to_domain_validation_error
from quill.domain.service import ContactService, NotificationService


class SubmitContactMessageRequest(BaseModel):
    """Submit contact message request."""

    name: str
    email: str
    subject: str
    message: str
    ip_address: str | None = None
    user_agent: str | None = None


class SubmitContactMessageResponse(ApiModel):
    """Submit contact message response."""

    success: bool = True
    message: str = "Message sent successfully"


class SubmitContactMessageUseCase:
    """Use case for the public contact form.

    The message is stored first; the notification emails are sent
    afterwards and their failures never reach the visitor.
    """

    def __init__(
        self,
        contact_service: ContactService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize submit contact message use case.

        Args:
            contact_service: Contact domain service
            notification_service: Sends the owner notification and auto-reply
        """
        self.contact_service = contact_service
        self.notification_service = notification_service

    async def execute(
        self,
        request: SubmitContactMessageRequest,
        schedule: Callable[..., Any] | None = None,
    ) -> SubmitContactMessageResponse:
        """Execute submit flow.

        Args:
            request: Visitor's message plus client metadata
            schedule: Runs ``schedule(func, *args)`` after the response, e.g.
                ``BackgroundTasks.add_task``. Emails are sent inline when None.

        Raises:
            ValidationError: If a field is missing, too long or the email is
                malformed
        """
        with logfire.span("submit_contact_message.execute"):
            try:
                saved = await self.contact_service.submit(
                    name=request.name,
                    email=request.email,
                    subject=request.subject,
                    message=request.message,
                    ip_address=request.ip_address,
                    user_agent=request.user_agent,
                )
            except PydanticValidationError as e:
                raise to_domain_validation_error(e) from e

            if schedule is not None:
                schedule(self.notification_service.notify_contact, saved)
            else:
                await self.notification_service.notify_contact(saved)

            return SubmitContactMessageResponse()
