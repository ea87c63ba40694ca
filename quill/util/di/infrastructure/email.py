"""Email infrastructure providers."""

from dishka import Scope, provide

from quill.adapter.email import SmtpEmailClient
from quill.config import EmailSettings
from quill.domain.service import EmailClient
from quill.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider sending through SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, email_settings: EmailSettings) -> EmailClient:
        """Provide SMTP email client."""
        return SmtpEmailClient(settings=email_settings)
