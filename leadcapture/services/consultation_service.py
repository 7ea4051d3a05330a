"""
Consultation service - free consultation bookings with lead scoring.
"""
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from leadcapture.core.exceptions import raise_validation_error
from leadcapture.models.choices import ConsultationStatus
from leadcapture.models.columns import utcnow
from leadcapture.models.consultation import Consultation
from leadcapture.repositories.consultation_repo import ConsultationRepository
from leadcapture.schemas.consultation import ConsultationCreate, ConsultationStatusUpdate
from leadcapture.services.base_service import SubmissionService, require_body
from leadcapture.services.email_service import EmailService
from leadcapture.services.email_templates import SubmissionKind
from leadcapture.services.scoring_service import (
    calculate_lead_score, consultation_follow_up, consultation_priority
)
from leadcapture.services.validation_service import (
    sanitize_email, sanitize_list, sanitize_text, validate_consultation
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as aware UTC; naive input is taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ConsultationService(SubmissionService[Consultation]):
    """Service for consultation bookings."""

    kind = SubmissionKind.CONSULTATION
    resource = "Consultation"
    statuses = ConsultationStatus.ALL
    create_error = "Failed to book consultation. Please try again."

    def __init__(self, repo: ConsultationRepository, email_service: EmailService):
        super().__init__(repo, email_service)

    async def create(
        self,
        payload: ConsultationCreate,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> Consultation:
        """
        Book a consultation.

        The lead score, priority and follow-up date are computed here once
        and never recalculated.
        """
        require_body(payload)

        data = {
            "name": sanitize_text(payload.name),
            "email": sanitize_email(payload.email),
            "phone": sanitize_text(payload.phone),
            "company": sanitize_text(payload.company),
            "industry": sanitize_text(payload.industry),
            "business_size": sanitize_text(payload.business_size),
            "current_challenges": sanitize_text(payload.current_challenges),
            # Duplicates dropped, first occurrence order kept
            "interested_services": list(dict.fromkeys(sanitize_list(payload.interested_services))),
            "budget": sanitize_text(payload.budget),
            "timeline": sanitize_text(payload.timeline),
            "preferred_contact_method": sanitize_text(payload.preferred_contact_method) or "email",
            "preferred_time": sanitize_text(payload.preferred_time) or "flexible",
            "timezone": sanitize_text(payload.timezone),
            "additional_notes": sanitize_text(payload.additional_notes),
        }

        errors = validate_consultation(data)
        if errors:
            raise_validation_error(errors)

        created_at = utcnow()
        score = calculate_lead_score(
            data["budget"],
            data["timeline"],
            data["interested_services"],
            data["business_size"],
            data["industry"],
        )
        priority = consultation_priority(score, data["timeline"])

        data.update({
            "lead_score": score,
            "priority": priority,
            "follow_up_date": consultation_follow_up(created_at, priority),
            "ip_address": ip_address,
            "user_agent": user_agent,
            "created_at": created_at,
            "updated_at": created_at,
        })

        return await self._store(data)

    async def update_status(
        self,
        consultation_id: uuid.UUID,
        payload: ConsultationStatusUpdate
    ) -> Consultation:
        """Change status; scheduled_date and consultation_notes only when provided."""
        await self._checked_for_update(consultation_id, payload)

        changes = {
            "status": payload.status,
            "scheduled_date": _as_utc(payload.scheduled_date),
            "consultation_notes": sanitize_text(payload.consultation_notes),
        }
        return await self._apply_update(consultation_id, changes)

    async def stats(self) -> dict:
        return await self.repo.get_stats()

    async def lead_stats(self) -> List[dict]:
        return await self.repo.get_lead_stats()
