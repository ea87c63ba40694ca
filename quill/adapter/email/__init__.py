"""Email transport adapters."""

from .client import MockEmailClient, SmtpEmailClient

__all__ = ["MockEmailClient", "SmtpEmailClient"]
