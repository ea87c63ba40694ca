"""Integration tests for PostgresContactMessageRepository.

Require a migrated PostgreSQL at DATABASE__URL; set RUN_INTEGRATION_TESTS=1
to enable them.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quill.domain.model import ContactMessage
from quill.domain.repository import ContactMessageRepository
from quill.domain.value import ContactMessageId
from quill.persistence.repository import PostgresContactMessageRepository
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("RUN_INTEGRATION_TESTS"),
    reason="needs a running PostgreSQL (set RUN_INTEGRATION_TESTS=1)",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresContactMessageRepository:
    """Integration tests for PostgresContactMessageRepository."""

    @pytest.mark.asyncio
    async def test_saved_message_is_visible_to_other_sessions(self, integration_env):
        contact_repo = await integration_env.get(ContactMessageRepository)
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        message = ContactMessage(
            id=ContactMessageId(uuid4()),
            name="Grace",
            email="grace@example.com",
            subject=f"Durable {uuid4().hex}",
            message="Loved the latest post.",
        )

        await contact_repo.save(message)

        async with session_factory() as other_session:
            other_repo = PostgresContactMessageRepository(other_session)
            found = await other_repo.find_by_id(message.id)

        assert found is not None
        assert found.subject == message.subject
