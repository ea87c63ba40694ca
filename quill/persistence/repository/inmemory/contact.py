"""In-memory contact message repository for testing."""

from typing import List, Optional

from quill.domain.model.contact import ContactMessage
from quill.domain.repository.contact import ContactMessageRepository
from quill.domain.value import ContactMessageId

from .store import InMemoryStore


class InMemoryContactMessageRepository(ContactMessageRepository):
    """In-memory implementation of ContactMessageRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._messages = (store or InMemoryStore()).contact_messages

    def _filtered(self, unread_only: bool) -> list[ContactMessage]:
        messages = list(self._messages.values())
        if unread_only:
            messages = [m for m in messages if not m.is_read]
        return messages

    async def find_by_id(
        self, message_id: ContactMessageId
    ) -> Optional[ContactMessage]:
        """Find a message by ID."""
        return self._messages.get(message_id)

    async def find_all(
        self, unread_only: bool = False, limit: int = 20, offset: int = 0
    ) -> List[ContactMessage]:
        """List messages, newest first."""
        messages = sorted(self._filtered(unread_only), key=lambda m: str(m.id))
        messages.sort(key=lambda m: m.created_at, reverse=True)
        return messages[offset : offset + limit]

    async def count(self, unread_only: bool = False) -> int:
        """Count messages."""
        return len(self._filtered(unread_only))

    async def save(self, message: ContactMessage) -> ContactMessage:
        """Save or update a message."""
        self._messages[message.id] = message
        return message
