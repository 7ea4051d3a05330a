"""
API dependencies - shared across all routes.
"""
import logging

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from leadcapture.config import settings
from leadcapture.core.exceptions import RateLimitError
from leadcapture.core.rate_limiter import RateLimiter, get_rate_limiter
from leadcapture.database import get_session
from leadcapture.repositories.consultation_repo import ConsultationRepository
from leadcapture.repositories.contact_repo import ContactRepository
from leadcapture.repositories.service_repo import ServiceInquiryRepository
from leadcapture.services.consultation_service import ConsultationService
from leadcapture.services.contact_service import ContactService
from leadcapture.services.email_service import EmailService, get_email_service
from leadcapture.services.service_inquiry_service import ServiceInquiryService

logger = logging.getLogger(__name__)


def get_client_info(request: Request) -> dict:
    """Extract client info from request."""
    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent")
    }


def enforce_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_rate_limiter)
) -> None:
    """
    Reject the request with 429 once the client IP is over its window quota.

    Sync on purpose: FastAPI runs it in the threadpool, off the event loop.
    """
    if not settings.RATE_LIMIT_ENABLED:
        return

    key = request.client.host if request.client else "unknown"
    if not limiter.check_limit(key):
        logger.warning(f"Rate limit exceeded for {key} on {request.url.path}")
        raise RateLimitError(
            retry_after=limiter.reset_after(key),
            limit=limiter.max_requests,
            remaining=limiter.remaining(key)
        )


def get_contact_service(
    session: AsyncSession = Depends(get_session),
    email_service: EmailService = Depends(get_email_service)
) -> ContactService:
    return ContactService(ContactRepository(session), email_service)


def get_consultation_service(
    session: AsyncSession = Depends(get_session),
    email_service: EmailService = Depends(get_email_service)
) -> ConsultationService:
    return ConsultationService(ConsultationRepository(session), email_service)


def get_service_inquiry_service(
    session: AsyncSession = Depends(get_session),
    email_service: EmailService = Depends(get_email_service)
) -> ServiceInquiryService:
    return ServiceInquiryService(ServiceInquiryRepository(session), email_service)
