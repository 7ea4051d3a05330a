"""
Contact service - contact form submissions.
"""
import uuid
from typing import Optional

from leadcapture.core.exceptions import raise_validation_error
from leadcapture.models.choices import ContactStatus
from leadcapture.models.columns import utcnow
from leadcapture.models.contact import Contact
from leadcapture.repositories.contact_repo import ContactRepository
from leadcapture.schemas.contact import ContactCreate, ContactStatusUpdate
from leadcapture.services.base_service import SubmissionService, require_body
from leadcapture.services.email_service import EmailService
from leadcapture.services.email_templates import SubmissionKind
from leadcapture.services.scoring_service import contact_priority
from leadcapture.services.validation_service import (
    sanitize_email, sanitize_text, validate_contact
)


class ContactService(SubmissionService[Contact]):
    """Service for contact form operations."""

    kind = SubmissionKind.CONTACT
    resource = "Contact"
    statuses = ContactStatus.ALL
    create_error = "Failed to submit contact form. Please try again."

    def __init__(self, repo: ContactRepository, email_service: EmailService):
        super().__init__(repo, email_service)

    async def create(
        self,
        payload: ContactCreate,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> Contact:
        """Validate, classify and store a contact message, then send emails."""
        require_body(payload)

        data = {
            "name": sanitize_text(payload.name),
            "email": sanitize_email(payload.email),
            "phone": sanitize_text(payload.phone),
            "company": sanitize_text(payload.company),
            "subject": sanitize_text(payload.subject),
            "message": sanitize_text(payload.message),
        }

        errors = validate_contact(data)
        if errors:
            raise_validation_error(errors)

        data["source"] = sanitize_text(payload.source) or "contact_form"
        data["priority"] = contact_priority(data["message"], data["subject"])
        data["ip_address"] = ip_address
        data["user_agent"] = user_agent
        data["created_at"] = data["updated_at"] = utcnow()

        return await self._store(data)

    async def update_status(self, contact_id: uuid.UUID, payload: ContactStatusUpdate) -> Contact:
        """Change status and optionally append an admin note."""
        contact = await self._checked_for_update(contact_id, payload)

        changes = {"status": payload.status}
        notes = self._appended_notes(contact.notes, payload.notes)
        if notes is not None:
            changes["notes"] = notes

        return await self._apply_update(contact_id, changes)

    async def stats(self) -> dict:
        return await self.repo.get_stats()
