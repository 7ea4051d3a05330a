"""
Email service - handles sending emails.
Currently supports: Mock (development) and SMTP (production ready).
"""
import asyncio
import logging
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr
from typing import Optional, List
from abc import ABC, abstractmethod

from leadcapture.config import settings

logger = logging.getLogger(__name__)


class EmailService(ABC):
    """Base email service interface."""

    @abstractmethod
    async def send_email(
        self,
        to: str,
        subject: str,
        body: str,
        html: Optional[str] = None,
        reply_to: Optional[str] = None
    ) -> bool:
        """Send an email. Returns True when the transport accepted it."""
        pass


class MockEmailService(EmailService):
    """
    Mock email service for development.
    Logs emails instead of sending.
    """

    def __init__(self):
        # Sent emails kept for testing/debugging
        self.sent_emails: List[dict] = []

    async def send_email(
        self,
        to: str,
        subject: str,
        body: str,
        html: Optional[str] = None,
        reply_to: Optional[str] = None
    ) -> bool:
        """Mock send - logs and stores the message."""
        self.sent_emails.append({
            "to": to,
            "subject": subject,
            "body": body,
            "html": html,
            "reply_to": reply_to,
        })
        logger.info(f"[MOCK EMAIL] To: {to}, Subject: {subject}")
        return True

    def get_last_email(self) -> Optional[dict]:
        """Get the last sent email (for testing)."""
        return self.sent_emails[-1] if self.sent_emails else None


class SMTPEmailService(EmailService):
    """
    SMTP email service for production.
    Configure with environment variables:
    - SMTP_HOST
    - SMTP_PORT
    - SMTP_USER
    - SMTP_PASSWORD
    - EMAIL_FROM
    """

    def __init__(self):
        self.host = settings.SMTP_HOST
        self.port = settings.SMTP_PORT
        self.user = settings.SMTP_USER
        self.password = settings.SMTP_PASSWORD
        self.use_tls = settings.SMTP_USE_TLS
        self.from_email = settings.EMAIL_FROM
        self.from_name = settings.EMAIL_FROM_NAME
        self.timeout = settings.EMAIL_SEND_TIMEOUT

    def _build_message(
        self,
        to: str,
        subject: str,
        body: str,
        html: Optional[str],
        reply_to: Optional[str]
    ) -> MIMEMultipart:
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = formataddr((self.from_name, self.from_email))
        msg['To'] = to
        if reply_to:
            msg['Reply-To'] = reply_to

        # Plain text first, HTML last so clients prefer it
        msg.attach(MIMEText(body, 'plain', 'utf-8'))
        if html:
            msg.attach(MIMEText(html, 'html', 'utf-8'))
        return msg

    def _send_sync(self, to: str, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.user and self.password:
                server.login(self.user, self.password)
            server.sendmail(self.from_email, [to], msg.as_string())

    async def send_email(
        self,
        to: str,
        subject: str,
        body: str,
        html: Optional[str] = None,
        reply_to: Optional[str] = None
    ) -> bool:
        """Send email via SMTP in a worker thread."""
        try:
            msg = self._build_message(to, subject, body, html, reply_to)
            await asyncio.to_thread(self._send_sync, to, msg)
            logger.info(f"Email sent to {to}: {subject}")
            return True

        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to}: {e}")
            return False


# =============================================================================
# EMAIL SERVICE SINGLETON
# =============================================================================

_email_service: Optional[EmailService] = None


def get_email_service() -> EmailService:
    """Get the email service instance."""
    global _email_service

    if _email_service is None:
        if settings.SMTP_HOST:
            logger.info("Using SMTP Email Service")
            _email_service = SMTPEmailService()
        else:
            logger.info("Using Mock Email Service (emails are logged, not sent)")
            _email_service = MockEmailService()

    return _email_service


def set_email_service(service: Optional[EmailService]) -> None:
    """Set custom email service (for testing)."""
    global _email_service
    _email_service = service
