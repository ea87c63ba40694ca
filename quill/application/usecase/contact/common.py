"""Shared contact response models."""

from datetime import datetime

from quill.application.usecase.base import ApiModel
from quill.domain.model import ContactMessage


class ContactMessageResponse(ApiModel):
    """Contact message as shown in the admin inbox."""

    id: str
    name: str
    email: str
    subject: str
    message: str
    ip_address: str | None
    user_agent: str | None
    is_read: bool
    is_replied: bool
    created_at: datetime

    @classmethod
    def from_message(cls, message: ContactMessage) -> "ContactMessageResponse":
        return cls(
            id=str(message.id),
            name=message.name,
            email=str(message.email),
            subject=message.subject,
            message=message.message,
            ip_address=message.ip_address,
            user_agent=message.user_agent,
            is_read=message.is_read,
            is_replied=message.is_replied,
            created_at=message.created_at,
        )
