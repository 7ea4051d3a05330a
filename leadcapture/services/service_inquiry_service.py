"""
Service inquiry service - project requests with deal value estimates.
"""
import uuid
from typing import List, Optional

from leadcapture.core.exceptions import raise_validation_error
from leadcapture.models.choices import InquiryStatus
from leadcapture.models.columns import utcnow
from leadcapture.models.service_inquiry import ServiceInquiry
from leadcapture.repositories.service_repo import ServiceInquiryRepository
from leadcapture.schemas.service_inquiry import InquiryStatusUpdate, ServiceInquiryCreate
from leadcapture.services.base_service import SubmissionService, require_body
from leadcapture.services.email_service import EmailService
from leadcapture.services.email_templates import SubmissionKind
from leadcapture.services.scoring_service import (
    calculate_estimated_value, inquiry_follow_up, inquiry_priority
)
from leadcapture.services.validation_service import (
    sanitize_email, sanitize_list, sanitize_text, validate_service_inquiry
)


SERVICE_TYPES: List[dict] = [
    {
        "id": "ai_website",
        "name": "AI-Powered Website",
        "description": "High-converting, SEO-optimized websites tailored for business growth",
        "base_price": 15000,
        "features": ["AI-driven design", "SEO optimization", "Mobile responsive", "CMS integration"],
    },
    {
        "id": "smart_chatbot",
        "name": "Smart Chatbot",
        "description": "24/7 automated customer support for lead generation and customer service",
        "base_price": 8000,
        "features": [
            "Natural language processing", "24/7 availability",
            "Lead qualification", "Multi-platform integration",
        ],
    },
    {
        "id": "email_marketing",
        "name": "Email Marketing Automation",
        "description": "AI-driven campaigns to increase open rates and conversions",
        "base_price": 5000,
        "features": ["Automated campaigns", "Personalization", "Analytics", "A/B testing"],
    },
    {
        "id": "social_media_automation",
        "name": "Social Media Automation",
        "description": "AI-generated captions and content scheduling for enhanced audience engagement",
        "base_price": 6000,
        "features": ["Content generation", "Scheduling", "Analytics", "Multi-platform support"],
    },
    {
        "id": "custom_ai_solution",
        "name": "Custom AI Solution",
        "description": "Tailored AI solutions designed specifically for your business needs",
        "base_price": 25000,
        "features": [
            "Custom development", "AI model training",
            "Integration support", "Ongoing maintenance",
        ],
    },
    {
        "id": "consultation",
        "name": "AI Strategy Consultation",
        "description": "Expert consultation to develop your AI transformation roadmap",
        "base_price": 2000,
        "features": ["Business analysis", "AI strategy", "Implementation roadmap", "ROI projections"],
    },
]


class ServiceInquiryService(SubmissionService[ServiceInquiry]):
    """Service for service inquiries."""

    kind = SubmissionKind.SERVICE
    resource = "Service inquiry"
    statuses = InquiryStatus.ALL
    create_error = "Failed to submit service inquiry. Please try again."

    def __init__(self, repo: ServiceInquiryRepository, email_service: EmailService):
        super().__init__(repo, email_service)

    async def create(
        self,
        payload: ServiceInquiryCreate,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> ServiceInquiry:
        """Validate, value and store an inquiry, then send emails."""
        require_body(payload)

        data = {
            "name": sanitize_text(payload.name),
            "email": sanitize_email(payload.email),
            "phone": sanitize_text(payload.phone),
            "company": sanitize_text(payload.company),
            "service_type": sanitize_text(payload.service_type),
            "project_description": sanitize_text(payload.project_description),
            "budget": sanitize_text(payload.budget),
            "timeline": sanitize_text(payload.timeline),
            "current_website": sanitize_text(payload.current_website),
            "current_challenges": sanitize_text(payload.current_challenges),
            "specific_requirements": sanitize_list(payload.specific_requirements),
            "target_audience": sanitize_text(payload.target_audience),
            "competitor_websites": sanitize_list(payload.competitor_websites),
            "preferred_style": sanitize_text(payload.preferred_style) or "not_sure",
            "additional_services": sanitize_list(payload.additional_services),
        }

        errors = validate_service_inquiry(data)
        if errors:
            raise_validation_error(errors)

        created_at = utcnow()
        value = calculate_estimated_value(
            data["service_type"],
            data["budget"],
            data["timeline"],
            data["additional_services"],
        )
        priority = inquiry_priority(value, data["timeline"])

        data.update({
            "estimated_value": value,
            "priority": priority,
            "follow_up_date": inquiry_follow_up(created_at, priority),
            "ip_address": ip_address,
            "user_agent": user_agent,
            "created_at": created_at,
            "updated_at": created_at,
        })

        return await self._store(data)

    async def update_status(
        self,
        inquiry_id: uuid.UUID,
        payload: InquiryStatusUpdate
    ) -> ServiceInquiry:
        """
        Change status, quote and assignee.

        Moving to "quoted" with a quote amount marks the quote as sent the
        first time only.
        """
        inquiry = await self._checked_for_update(inquiry_id, payload)

        changes = {
            "status": payload.status,
            "quote_amount": payload.quote_amount,
            "assigned_to": sanitize_text(payload.assigned_to),
        }

        quote_amount = payload.quote_amount if payload.quote_amount is not None else inquiry.quote_amount
        if payload.status == InquiryStatus.QUOTED and quote_amount is not None and not inquiry.quote_sent:
            changes["quote_sent"] = True
            changes["quote_sent_at"] = utcnow()

        notes = self._appended_notes(inquiry.notes, payload.notes)
        if notes is not None:
            changes["notes"] = notes

        return await self._apply_update(inquiry_id, changes)

    async def stats(self) -> dict:
        return await self.repo.get_stats()

    async def stats_by_service(self) -> List[dict]:
        return await self.repo.get_stats_by_service()

    @staticmethod
    def service_types() -> List[dict]:
        return SERVICE_TYPES
