"""Unit tests for the SMTP email client."""

from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from quill.adapter.email import SmtpEmailClient
from quill.adapter.error import EmailDeliveryError
from quill.config import EmailSettings
from quill.domain.service import OutgoingEmail

SMTP_SEND = "quill.adapter.email.client.aiosmtplib.send"

EMAIL = OutgoingEmail(
    sender_name="Blog Contact",
    to="reader@example.com",
    subject="Re: Hello",
    html="<p>Thanks!</p>",
)


class TestSmtpEmailClient:
    """Tests for SmtpEmailClient."""

    @pytest.mark.asyncio
    async def test_sends_html_message(self):
        client = SmtpEmailClient(
            EmailSettings(host="smtp.example.com", port=465, sender="blog@example.com")
        )

        with patch(SMTP_SEND, new=AsyncMock()) as send:
            await client.send(EMAIL)

        message = send.await_args.args[0]
        kwargs = send.await_args.kwargs
        assert message["To"] == "reader@example.com"
        assert message["From"] == "Blog Contact <blog@example.com>"
        assert message["Subject"] == "Re: Hello"
        assert message.get_body(preferencelist=("html",)).get_content().strip() == (
            "<p>Thanks!</p>"
        )
        assert kwargs["hostname"] == "smtp.example.com"
        assert kwargs["use_tls"] is True

    @pytest.mark.asyncio
    async def test_starttls_port_does_not_use_implicit_tls(self):
        client = SmtpEmailClient(EmailSettings(port=587))

        with patch(SMTP_SEND, new=AsyncMock()) as send:
            await client.send(EMAIL)

        assert send.await_args.kwargs["use_tls"] is False

    @pytest.mark.asyncio
    async def test_smtp_failure_is_wrapped(self):
        client = SmtpEmailClient(EmailSettings())
        failing = AsyncMock(side_effect=aiosmtplib.SMTPConnectError("refused"))

        with patch(SMTP_SEND, new=failing):
            with pytest.raises(EmailDeliveryError):
                await client.send(EMAIL)
