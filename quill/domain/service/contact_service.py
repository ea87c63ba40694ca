"""Contact message domain service."""

from uuid import uuid4

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import ContactMessage
from quill.domain.repository import ContactMessageRepository
from quill.domain.value import ContactMessageId

from .base import Service


class ContactService(Service):
    """Domain service for the contact inbox."""

    def __init__(self, contact_repository: ContactMessageRepository) -> None:
        """Initialize contact service.

        Args:
            contact_repository: Contact message repository
        """
        self.contact_repository = contact_repository

    async def submit(
        self,
        name: str,
        email: str,
        subject: str,
        message: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> ContactMessage:
        """Persist a new, unread and unreplied message.

        Raises:
            pydantic.ValidationError: If a field is missing, too long or the
                email is malformed
        """
        with logfire.span("contact_service.submit", subject=subject):
            contact = ContactMessage(
                id=ContactMessageId(uuid4()),
                name=name,
                email=email,
                subject=subject,
                message=message,
                ip_address=ip_address,
                user_agent=user_agent,
            )
            saved = await self.contact_repository.save(contact)
            logfire.info("Contact message saved", message_id=str(saved.id))
            return saved

    async def list_messages(
        self, page: int, limit: int, unread_only: bool = False
    ) -> tuple[list[ContactMessage], int]:
        """Return one page of messages, newest first, plus the total count."""
        with logfire.span(
            "contact_service.list_messages",
            page=page,
            limit=limit,
            unread_only=unread_only,
        ):
            total = await self.contact_repository.count(unread_only=unread_only)
            messages = await self.contact_repository.find_all(
                unread_only=unread_only, limit=limit, offset=(page - 1) * limit
            )
            return messages, total

    async def mark_read(self, message_id: ContactMessageId) -> ContactMessage:
        """Set the read flag; the replied flag is left unchanged.

        Raises:
            NotFoundError: If the message doesn't exist
        """
        return await self._set_flag(message_id, "is_read")

    async def mark_replied(self, message_id: ContactMessageId) -> ContactMessage:
        """Set the replied flag; the read flag is left unchanged.

        Raises:
            NotFoundError: If the message doesn't exist
        """
        return await self._set_flag(message_id, "is_replied")

    async def _set_flag(
        self, message_id: ContactMessageId, flag: str
    ) -> ContactMessage:
        with logfire.span(
            "contact_service.set_flag", message_id=str(message_id), flag=flag
        ):
            contact = await self.contact_repository.find_by_id(message_id)
            if contact is None:
                logfire.warn("Contact message not found", message_id=str(message_id))
                raise NotFoundError("Message", str(message_id))

            updated = contact.model_copy(update={flag: True})
            return await self.contact_repository.save(updated)
