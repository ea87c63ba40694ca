"""Outbound email notifications for contact form submissions."""

import asyncio
from html import escape

import logfire

from quill.config import EmailSettings
from quill.domain.model import ContactMessage
from quill.domain.value.common import ValueObject

from .base import Service


class OutgoingEmail(ValueObject):
    """A single HTML email ready to hand to a mail transport."""

    sender_name: str
    to: str
    subject: str
    html: str


class EmailClient:
    """Generic email transport interface."""

    async def send(self, email: OutgoingEmail) -> None:
        """Deliver one email.

        Raises:
            EmailDeliveryError: If the transport rejects or cannot reach the server
        """
        raise NotImplementedError


NOTIFICATION_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">New Contact Form Submission</h2>
  <div style="background: #f5f5f5; padding: 20px; border-radius: 5px;">
    <p><strong>From:</strong> {name} ({email})</p>
    <p><strong>Subject:</strong> {subject}</p>
    <p><strong>Message:</strong></p>
    <div style="white-space: pre-wrap; background: white;">{message}</div>
  </div>
  <p style="color: #666; font-size: 12px; margin-top: 20px;">
    This message was sent from the contact form on your blog.
  </p>
</div>
"""

AUTO_REPLY_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #333;">Thank You for Your Message</h2>
  <p>Hi {name},</p>
  <p>Thank you for reaching out! I've received your message and will get back to
  you as soon as possible.</p>
  <p>Best regards,<br>{owner}</p>
  <hr style="border: none; border-top: 1px solid #eee; margin: 30px 0;">
  <p style="color: #666; font-size: 12px;">
    This is an automated response. Please do not reply to this email.
  </p>
</div>
"""


class NotificationService(Service):
    """Sends the owner notification and the sender auto-reply.

    Delivery is best effort: failures are logged and never raised, so a
    broken mail server cannot fail a contact submission.
    """

    def __init__(
        self, email_client: EmailClient, email_settings: EmailSettings
    ) -> None:
        """Initialize notification service.

        Args:
            email_client: Mail transport
            email_settings: Sender/recipient configuration
        """
        self.email_client = email_client
        self.email_settings = email_settings

    def build_contact_emails(self, message: ContactMessage) -> list[OutgoingEmail]:
        """Render the owner notification and the auto-reply for a message.

        All user-supplied text is HTML-escaped.
        """
        notification = OutgoingEmail(
            sender_name=self.email_settings.sender_name,
            to=self.email_settings.recipient,
            subject=f"[Contact Form] {message.subject}",
            html=NOTIFICATION_TEMPLATE.format(
                name=escape(message.name),
                email=escape(str(message.email)),
                subject=escape(message.subject),
                message=escape(message.message),
            ),
        )
        auto_reply = OutgoingEmail(
            sender_name=self.email_settings.owner_name,
            to=str(message.email),
            subject=f"Re: {message.subject}",
            html=AUTO_REPLY_TEMPLATE.format(
                name=escape(message.name),
                owner=escape(self.email_settings.owner_name),
            ),
        )
        return [notification, auto_reply]

    async def notify_contact(self, message: ContactMessage) -> int:
        """Send both contact emails concurrently.

        Returns:
            Number of emails delivered
        """
        with logfire.span(
            "notification_service.notify_contact", message_id=str(message.id)
        ):
            emails = self.build_contact_emails(message)
            results = await asyncio.gather(
                *(self.email_client.send(email) for email in emails),
                return_exceptions=True,
            )

            delivered = 0
            for email, result in zip(emails, results):
                if isinstance(result, Exception):
                    logfire.error(
                        "Contact email delivery failed",
                        message_id=str(message.id),
                        subject=email.subject,
                        error=str(result),
                    )
                else:
                    delivered += 1

            logfire.info(
                "Contact emails processed",
                message_id=str(message.id),
                delivered=delivered,
                failed=len(emails) - delivered,
            )
            return delivered
