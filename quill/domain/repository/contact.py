"""Contact message repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.contact import ContactMessage
from quill.domain.value import ContactMessageId


class ContactMessageRepository(ABC):
    """Repository for contact messages."""

    @abstractmethod
    async def find_by_id(
        self, message_id: ContactMessageId
    ) -> Optional[ContactMessage]:
        """Find a message by ID."""
        pass

    @abstractmethod
    async def find_all(
        self, unread_only: bool = False, limit: int = 20, offset: int = 0
    ) -> List[ContactMessage]:
        """List messages, newest first.

        Args:
            unread_only: Only messages not yet marked read
            limit: Maximum number of messages to return
            offset: Number of messages to skip
        """
        pass

    @abstractmethod
    async def count(self, unread_only: bool = False) -> int:
        """Count messages."""
        pass

    @abstractmethod
    async def save(self, message: ContactMessage) -> ContactMessage:
        """Save a message (create or update).

        The write is committed before this returns, not at the end of the
        request.
        """
        pass
