"""Email clients implementing the domain EmailClient interface."""

from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib
import logfire

from quill.adapter.error import EmailDeliveryError
from quill.config import EmailSettings
from quill.domain.service.notification_service import EmailClient, OutgoingEmail


class SmtpEmailClient(EmailClient):
    """Sends email through an SMTP server with aiosmtplib."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize SMTP client.

        Args:
            settings: SMTP host, credentials and sender configuration
        """
        self.settings = settings

    def _build_message(self, email: OutgoingEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((email.sender_name, self.settings.sender))
        message["To"] = email.to
        message["Subject"] = email.subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(email.html, subtype="html")
        return message

    async def send(self, email: OutgoingEmail) -> None:
        """Deliver one email.

        Raises:
            EmailDeliveryError: If the SMTP exchange fails
        """
        use_tls = self.settings.use_tls
        if use_tls is None:
            use_tls = self.settings.port == 465

        with logfire.span("smtp.send", to=email.to, subject=email.subject):
            try:
                await aiosmtplib.send(
                    self._build_message(email),
                    hostname=self.settings.host,
                    port=self.settings.port,
                    username=self.settings.username,
                    password=self.settings.password,
                    use_tls=use_tls,
                    timeout=self.settings.timeout,
                )
            except (aiosmtplib.SMTPException, OSError) as e:
                raise EmailDeliveryError(f"Failed to send email: {e}") from e

            logfire.info("Email sent", to=email.to, subject=email.subject)


class MockEmailClient(EmailClient):
    """Records emails instead of sending them.

    Set ``fail`` to make every send raise, to exercise delivery failures.
    """

    def __init__(self) -> None:
        self.sent: list[OutgoingEmail] = []
        self.fail = False

    async def send(self, email: OutgoingEmail) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock email delivery failure")
        self.sent.append(email)
