"""
Notification service - confirmation and admin emails for new submissions.
"""
import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from leadcapture.config import settings
from leadcapture.repositories.base import BaseRepository
from leadcapture.services.email_service import EmailService
from leadcapture.services.email_templates import (
    EmailTemplate, Recipient, SubmissionKind, render_template
)

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    user_sent: bool = False
    admin_sent: bool = False


class NotificationService:
    """
    Sends the user confirmation and the admin notification for a record.

    Both sends are attempted independently; failures are logged and
    reported in the DeliveryResult, never raised.
    """

    def __init__(
        self,
        repo: BaseRepository,
        email_service: EmailService,
        timeout: float = None
    ):
        self.repo = repo
        self.email_service = email_service
        self.timeout = settings.EMAIL_SEND_TIMEOUT if timeout is None else timeout

    async def _send(
        self,
        to: str,
        template: EmailTemplate,
        reply_to: str = None
    ) -> bool:
        try:
            return bool(await asyncio.wait_for(
                self.email_service.send_email(
                    to=to,
                    subject=template.subject,
                    body=template.text,
                    html=template.html,
                    reply_to=reply_to
                ),
                timeout=self.timeout
            ))
        except asyncio.TimeoutError:
            logger.warning(f"Email to {to} timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"Email to {to} failed: {e}")
        return False

    async def notify(self, kind: SubmissionKind, record) -> DeliveryResult:
        """Send both emails for a stored record and persist the delivery flags."""
        data = record.model_dump()
        result = DeliveryResult()

        result.user_sent = await self._send(
            record.email,
            render_template(kind, Recipient.USER, data)
        )
        if not result.user_sent:
            logger.warning(f"Confirmation email not delivered for {kind.value} {record.id}")

        result.admin_sent = await self._send(
            settings.ADMIN_EMAIL,
            render_template(kind, Recipient.ADMIN, data),
            reply_to=record.email
        )
        if not result.admin_sent:
            logger.warning(f"Admin notification not delivered for {kind.value} {record.id}")

        if result.user_sent or result.admin_sent:
            await self._write_back(record, result)

        return result

    async def _write_back(self, record, result: DeliveryResult) -> None:
        try:
            await self.repo.mark_email_status(record.id, result.user_sent, result.admin_sent)
        except SQLAlchemyError as e:
            logger.error(f"Failed to record email status for {record.id}: {e}")
