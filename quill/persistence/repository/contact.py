"""PostgreSQL implementation of ContactMessage repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import ContactMessage
from quill.domain.repository import ContactMessageRepository
from quill.domain.value import ContactMessageId
from quill.persistence.mappers import contact_message_to_dict, row_to_contact_message
from quill.persistence.tables import contact_messages_table


class PostgresContactMessageRepository(ContactMessageRepository):
    """PostgreSQL implementation of ContactMessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, message_id: ContactMessageId
    ) -> Optional[ContactMessage]:
        """Find a message by ID."""
        stmt = select(contact_messages_table).where(
            contact_messages_table.c.id == message_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_contact_message(dict(row)) if row else None

    async def find_all(
        self, unread_only: bool = False, limit: int = 20, offset: int = 0
    ) -> List[ContactMessage]:
        """List messages, newest first."""
        with logfire.span(
            "contact_repository.find_all",
            unread_only=unread_only,
            limit=limit,
            offset=offset,
        ):
            stmt = select(contact_messages_table)
            if unread_only:
                stmt = stmt.where(contact_messages_table.c.is_read.is_(False))
            stmt = (
                stmt.order_by(
                    desc(contact_messages_table.c.created_at),
                    asc(contact_messages_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            return [row_to_contact_message(dict(row)) for row in result.mappings()]

    async def count(self, unread_only: bool = False) -> int:
        """Count messages."""
        stmt = select(func.count()).select_from(contact_messages_table)
        if unread_only:
            stmt = stmt.where(contact_messages_table.c.is_read.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, message: ContactMessage) -> ContactMessage:
        """Save a message (create or update) and commit it immediately."""
        existing = await self.find_by_id(message.id)

        message_dict = contact_message_to_dict(message)

        if existing:
            stmt = (
                contact_messages_table.update()
                .where(contact_messages_table.c.id == message.id)
                .values(**message_dict)
            )
        else:
            stmt = contact_messages_table.insert().values(**message_dict)

        await self.session.execute(stmt)
        await self.session.commit()
        logfire.debug("Contact message committed", message_id=str(message.id))
        return message
