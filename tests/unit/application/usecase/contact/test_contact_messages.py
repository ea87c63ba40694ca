"""Unit tests for the contact use cases."""

from uuid import uuid4

import pytest

from quill.application.usecase.contact import (
    ListMessagesRequest,
    ListMessagesUseCase,
    MarkMessageReadUseCase,
    MarkMessageRepliedUseCase,
    MarkMessageRequest,
    SubmitContactMessageRequest,
    SubmitContactMessageUseCase,
)
from quill.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quill.domain.repository import ContactMessageRepository, UserRepository
from quill.domain.service import EmailClient
from quill.domain.value import UserRole
from quill.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_submission(**overrides) -> SubmitContactMessageRequest:
    fields = {
        "name": "Grace",
        "email": "grace@example.com",
        "subject": "Hello",
        "message": "Loved the latest post.",
        "ip_address": "203.0.113.7",
        "user_agent": "pytest",
    }
    fields.update(overrides)
    return SubmitContactMessageRequest(**fields)


class TestSubmitContactMessage:
    """Tests for SubmitContactMessageUseCase."""

    @pytest.mark.asyncio
    async def test_stores_message_and_sends_emails(self, unit_env):
        use_case = await unit_env.get(SubmitContactMessageUseCase)
        contact_repo = await unit_env.get(ContactMessageRepository)
        email_client = await unit_env.get(EmailClient)

        response = await use_case.execute(make_submission())

        assert response.success is True
        assert response.message == "Message sent successfully"
        [stored] = await contact_repo.find_all()
        assert stored.ip_address == "203.0.113.7"
        assert stored.is_read is False
        assert stored.is_replied is False
        assert len(email_client.sent) == 2

    @pytest.mark.asyncio
    async def test_scheduled_emails_run_later(self, unit_env):
        use_case = await unit_env.get(SubmitContactMessageUseCase)
        email_client = await unit_env.get(EmailClient)
        scheduled = []

        await use_case.execute(
            make_submission(),
            schedule=lambda func, *args: scheduled.append((func, args)),
        )

        assert email_client.sent == []
        [(func, args)] = scheduled
        assert await func(*args) == 2

    @pytest.mark.asyncio
    async def test_message_is_stored_before_emails_are_scheduled(self, unit_env):
        use_case = await unit_env.get(SubmitContactMessageUseCase)
        store = await unit_env.get(InMemoryStore)
        stored_at_schedule_time = []

        def schedule(func, *args):
            [message] = args
            stored_at_schedule_time.append(store.contact_messages.get(message.id))

        await use_case.execute(make_submission(subject="Ordering"), schedule=schedule)

        [stored] = stored_at_schedule_time
        assert stored is not None
        assert stored.subject == "Ordering"

    @pytest.mark.asyncio
    async def test_email_failure_does_not_fail_submission(self, unit_env):
        use_case = await unit_env.get(SubmitContactMessageUseCase)
        contact_repo = await unit_env.get(ContactMessageRepository)
        email_client = await unit_env.get(EmailClient)
        email_client.fail = True

        response = await use_case.execute(make_submission())

        assert response.success is True
        assert await contact_repo.count() == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"name": ""},
            {"subject": "s" * 201},
            {"message": "m" * 5001},
        ],
    )
    async def test_invalid_submission_is_rejected(self, unit_env, overrides):
        use_case = await unit_env.get(SubmitContactMessageUseCase)
        contact_repo = await unit_env.get(ContactMessageRepository)

        with pytest.raises(ValidationError):
            await use_case.execute(make_submission(**overrides))

        assert await contact_repo.count() == 0


class TestContactInbox:
    """Tests for listing and flagging messages."""

    @pytest.mark.asyncio
    async def test_admin_lists_and_flags_messages(self, unit_env):
        submit = await unit_env.get(SubmitContactMessageUseCase)
        list_use_case = await unit_env.get(ListMessagesUseCase)
        mark_read = await unit_env.get(MarkMessageReadUseCase)
        mark_replied = await unit_env.get(MarkMessageRepliedUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))
        await submit.execute(make_submission(subject="First"))
        await submit.execute(make_submission(subject="Second"))

        inbox = await list_use_case.execute(
            ListMessagesRequest(requester_id=str(admin.id))
        )
        target = inbox.messages[0]
        read = await mark_read.execute(
            MarkMessageRequest(message_id=target.id, requester_id=str(admin.id))
        )
        replied = await mark_replied.execute(
            MarkMessageRequest(message_id=target.id, requester_id=str(admin.id))
        )
        unread = await list_use_case.execute(
            ListMessagesRequest(requester_id=str(admin.id), unread_only=True)
        )

        assert inbox.total_messages == 2
        assert read.is_read is True and read.is_replied is False
        assert replied.is_read is True and replied.is_replied is True
        assert unread.total_messages == 1
        assert unread.messages[0].id != target.id

    @pytest.mark.asyncio
    async def test_replied_flag_leaves_read_flag_alone(self, unit_env):
        submit = await unit_env.get(SubmitContactMessageUseCase)
        list_use_case = await unit_env.get(ListMessagesUseCase)
        mark_replied = await unit_env.get(MarkMessageRepliedUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))
        await submit.execute(make_submission())
        inbox = await list_use_case.execute(
            ListMessagesRequest(requester_id=str(admin.id))
        )

        replied = await mark_replied.execute(
            MarkMessageRequest(
                message_id=inbox.messages[0].id, requester_id=str(admin.id)
            )
        )

        assert replied.is_replied is True
        assert replied.is_read is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -3])
    async def test_non_positive_limit_means_one_per_page(self, unit_env, limit):
        submit = await unit_env.get(SubmitContactMessageUseCase)
        list_use_case = await unit_env.get(ListMessagesUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))
        await submit.execute(make_submission(subject="First"))
        await submit.execute(make_submission(subject="Second"))

        inbox = await list_use_case.execute(
            ListMessagesRequest(requester_id=str(admin.id), limit=limit)
        )

        assert len(inbox.messages) == 1
        assert inbox.total_pages == 2

    @pytest.mark.asyncio
    async def test_non_admin_cannot_read_inbox(self, unit_env):
        list_use_case = await unit_env.get(ListMessagesUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user(role=UserRole.AUTHOR))

        with pytest.raises(NotAuthorizedError):
            await list_use_case.execute(
                ListMessagesRequest(requester_id=str(author.id))
            )

    @pytest.mark.asyncio
    async def test_marking_unknown_message(self, unit_env):
        mark_read = await unit_env.get(MarkMessageReadUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(role=UserRole.ADMIN))

        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkMessageRequest(message_id=str(uuid4()), requester_id=str(admin.id))
            )
