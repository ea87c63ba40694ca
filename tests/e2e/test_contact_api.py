"""End-to-end tests for the contact endpoints."""

from uuid import uuid4

import pytest

from quill.domain.service import EmailClient
from quill.domain.value import UserRole
from tests.harness import create_api_fixture

# E2E test fixture
api_env = create_api_fixture()

FORM = {
    "name": "Judy",
    "email": "judy@example.com",
    "subject": "Booking",
    "message": "Do you have openings in May?",
}


class TestSubmitContact:
    """POST /api/contact."""

    @pytest.mark.asyncio
    async def test_submission_triggers_emails(self, api_env):
        email_client = await api_env.container.get(EmailClient)

        response = await api_env.client.post(
            "/api/contact", json=FORM, headers={"User-Agent": "contact-test"}
        )

        assert response.status_code == 201
        assert response.json() == {
            "success": True,
            "message": "Message sent successfully",
        }
        # Background tasks have finished once the ASGI call returns
        assert sorted(e.subject for e in email_client.sent) == [
            "Re: Booking",
            "[Contact Form] Booking",
        ]
        assert "judy@example.com" in [e.to for e in email_client.sent]

    @pytest.mark.asyncio
    async def test_email_failure_still_succeeds(self, api_env):
        email_client = await api_env.container.get(EmailClient)
        email_client.fail = True

        response = await api_env.client.post("/api/contact", json=FORM)

        assert response.status_code == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [{"email": "nope"}, {"message": ""}, {"subject": "s" * 201}],
    )
    async def test_invalid_form(self, api_env, overrides):
        email_client = await api_env.container.get(EmailClient)

        response = await api_env.client.post(
            "/api/contact", json={**FORM, **overrides}
        )

        assert response.status_code == 400
        assert "error" in response.json()
        assert email_client.sent == []

    @pytest.mark.asyncio
    async def test_missing_field(self, api_env):
        body = {k: v for k, v in FORM.items() if k != "name"}

        response = await api_env.client.post("/api/contact", json=body)

        assert response.status_code == 400


class TestContactInbox:
    """Admin inbox endpoints."""

    @pytest.mark.asyncio
    async def test_admin_reads_and_flags_messages(self, api_env):
        await api_env.create_user("admin")
        headers = await api_env.login("admin")
        await api_env.client.post("/api/contact", json=FORM)
        await api_env.client.post("/api/contact", json={**FORM, "subject": "Again"})

        inbox = await api_env.client.get("/api/contact", headers=headers)
        assert inbox.status_code == 200
        data = inbox.json()
        assert data["totalMessages"] == 2
        assert data["currentPage"] == 1
        assert data["totalPages"] == 1
        message = data["messages"][0]
        assert message["ipAddress"]
        assert message["isRead"] is False

        read = await api_env.client.put(
            f"/api/contact/{message['id']}/read", headers=headers
        )
        replied = await api_env.client.put(
            f"/api/contact/{message['id']}/replied", headers=headers
        )
        unread = await api_env.client.get(
            "/api/contact", params={"unread": "true"}, headers=headers
        )

        assert read.json()["isRead"] is True
        assert read.json()["isReplied"] is False
        assert replied.json()["isReplied"] is True
        assert replied.json()["isRead"] is True
        assert unread.json()["totalMessages"] == 1

    @pytest.mark.asyncio
    async def test_inbox_requires_admin(self, api_env):
        await api_env.create_user("author", role=UserRole.AUTHOR)
        headers = await api_env.login("author")

        anonymous = await api_env.client.get("/api/contact")
        author = await api_env.client.get("/api/contact", headers=headers)

        assert anonymous.status_code == 401
        assert author.status_code == 403

    @pytest.mark.asyncio
    async def test_flag_unknown_message(self, api_env):
        await api_env.create_user("admin")
        headers = await api_env.login("admin")

        response = await api_env.client.put(
            f"/api/contact/{uuid4()}/read", headers=headers
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Message not found"}
