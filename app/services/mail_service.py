"""
app/services/mail_service.py

Purpose: Contact form relay

- Composes the "Contact Us" e-mail
- Sends it through the configured SMTP relay (implicit TLS, fixed timeout)
- No retry or queue; a relay failure is reported to the caller
"""

from email.message import EmailMessage
from typing import Optional

import aiosmtplib

from app.core.config import Settings, settings
from app.core.exceptions import ExternalServiceError
from app.core.logging import get_logger

logger = get_logger(__name__)


def build_contact_email(
    name: str,
    email: str,
    message: str,
    sender: str,
    recipient: str,
) -> EmailMessage:
    """
    Builds the support e-mail for a contact form submission.

    The relay only accepts mail from the authenticated mailbox, so the
    visitor's address goes in Reply-To.
    """
    mail = EmailMessage()
    mail["From"] = sender
    mail["To"] = recipient
    mail["Reply-To"] = email
    mail["Subject"] = f"Contact Us Message from {name}"
    mail.set_content(f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}")
    return mail


class MailService:
    """Service for relaying contact form messages to the support mailbox"""

    def __init__(self, config: Optional[Settings] = None):
        config = config or settings
        self.hostname = config.SMTP_HOST
        self.port = config.SMTP_PORT
        self.use_tls = config.SMTP_USE_TLS
        self.username = config.SMTP_USER
        self.password = config.SMTP_PASS
        self.timeout = config.SMTP_TIMEOUT
        self.support_address = config.SUPPORT_EMAIL

    async def send_contact_message(self, name: str, email: str, message: str) -> None:
        """
        Sends one e-mail to the support address.

        Raises:
            ExternalServiceError: The relay refused the message or timed out
        """
        mail = build_contact_email(
            name=name,
            email=email,
            message=message,
            sender=self.username or self.support_address,
            recipient=self.support_address,
        )

        logger.info(f"📤 Relaying contact message from {email}")

        try:
            await aiosmtplib.send(
                mail,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"❌ Mail relay error: {e}", exc_info=True)
            raise ExternalServiceError("Failed to send email") from e

        logger.info("✅ Contact message relayed")

    def is_configured(self) -> bool:
        """Check if SMTP credentials are present"""
        return bool(self.hostname and self.username and self.password)
