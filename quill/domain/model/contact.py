"""Contact message submitted through the public contact form."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from quill.domain.model.common import DomainModel, utcnow
from quill.domain.value import ContactMessageId


class ContactMessage(DomainModel):
    """Visitor message.

    Created anonymously; afterwards only the read/replied flags change.
    """

    id: ContactMessageId
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=5000)
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    is_read: bool = False
    is_replied: bool = False
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("name", "subject", "message", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v
