"""
Shared plumbing for the submission services.
"""
import logging
import uuid
from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from leadcapture.core.exceptions import (
    InfrastructureError, InputError, raise_invalid_status, raise_not_found
)
from leadcapture.models.columns import utcnow
from leadcapture.repositories.base import BaseRepository
from leadcapture.services.email_service import EmailService
from leadcapture.services.email_templates import SubmissionKind
from leadcapture.services.notification_service import NotificationService
from leadcapture.services.validation_service import sanitize_text

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


def require_body(payload: BaseModel) -> None:
    """Reject a JSON body that set no fields at all."""
    if not payload.model_fields_set:
        raise InputError()


def note_entry(content: str) -> dict:
    return {
        "content": content,
        "created_at": utcnow().isoformat(),
        "created_by": "admin",
    }


class SubmissionService(Generic[ModelType]):
    """Create, read and status-update flow common to every submission kind."""

    kind: SubmissionKind
    resource: str
    statuses: Sequence[str]
    create_error: str = "Failed to store submission. Please try again."

    def __init__(self, repo: BaseRepository, email_service: EmailService):
        self.repo = repo
        self.session: AsyncSession = repo.session
        self.notifier = NotificationService(repo, email_service)

    async def _store(self, data: dict) -> ModelType:
        try:
            record = await self.repo.create(data)
        except SQLAlchemyError:
            logger.exception(f"Failed to store {self.kind.value} submission")
            await self.session.rollback()
            raise InfrastructureError(self.create_error)

        logger.info(f"{self.resource} {record.id} created (priority={record.priority})")
        await self.notifier.notify(self.kind, record)
        return record

    async def get(self, record_id: uuid.UUID) -> ModelType:
        record = await self.repo.get(record_id)
        if not record:
            raise_not_found(self.resource, str(record_id))
        return record

    async def list(
        self,
        filters: Optional[dict] = None,
        page: int = 1,
        limit: int = 10,
        order_by: str = "created_at",
        order_desc: bool = True
    ) -> dict:
        return await self.repo.list_paginated(filters, page, limit, order_by, order_desc)

    async def _checked_for_update(self, record_id: uuid.UUID, payload: BaseModel) -> ModelType:
        """Body, existence and status checks, in that order, before any change."""
        require_body(payload)
        record = await self.get(record_id)
        if payload.status not in self.statuses:
            raise_invalid_status(self.statuses)
        return record

    async def _apply_update(self, record_id: uuid.UUID, changes: dict) -> ModelType:
        try:
            return await self.repo.update(record_id, changes)
        except SQLAlchemyError:
            logger.exception(f"Failed to update {self.kind.value} {record_id}")
            await self.session.rollback()
            raise InfrastructureError(f"Failed to update {self.resource.lower()} status")

    @staticmethod
    def _appended_notes(existing: List[dict], notes: Optional[str]) -> Optional[List[dict]]:
        """New notes list with the entry appended, or None when there is nothing to add."""
        content = sanitize_text(notes)
        if not content:
            return None
        return [*(existing or []), note_entry(content)]
