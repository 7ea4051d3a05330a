"""
Consultation API routes.
"""
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from leadcapture.api.deps import enforce_rate_limit, get_client_info, get_consultation_service
from leadcapture.config import settings
from leadcapture.core.responses import success_response
from leadcapture.schemas.common import ERROR_RESPONSES
from leadcapture.schemas.consultation import (
    ConsultationCreate, ConsultationListItem, ConsultationResponse,
    ConsultationStatusUpdate, ConsultationStatusUpdated, ConsultationSubmitted,
    LeadCategoryStats
)
from leadcapture.services.consultation_service import ConsultationService

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/consultation",
    tags=["consultation"],
    dependencies=[Depends(enforce_rate_limit)],
    responses=ERROR_RESPONSES
)


@router.post("", status_code=201)
async def book_consultation(
    payload: ConsultationCreate,
    client: dict = Depends(get_client_info),
    service: ConsultationService = Depends(get_consultation_service)
):
    """Book a free consultation. The response carries the computed lead score."""
    consultation = await service.create(payload, **client)
    return success_response(
        "Free consultation booked successfully",
        ConsultationSubmitted.model_validate(consultation),
        status_code=201
    )


@router.get("")
async def list_consultations(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort_by: str = Query("created_at", alias="sortBy"),
    sort_order: str = Query("DESC", alias="sortOrder"),
    service: ConsultationService = Depends(get_consultation_service)
):
    """List consultations. Unknown sortBy values fall back to created_at."""
    result = await service.list(
        {"status": status, "priority": priority},
        page,
        limit,
        order_by=sort_by,
        order_desc=sort_order.upper() != "ASC"
    )
    items = [ConsultationListItem.model_validate(c) for c in result["items"]]
    return success_response("Consultations retrieved", items, meta={"pagination": result["pagination"]})


@router.get("/stats/summary")
async def consultation_stats(service: ConsultationService = Depends(get_consultation_service)):
    return success_response("Consultation statistics retrieved", await service.stats())


@router.get("/stats/leads")
async def consultation_lead_stats(service: ConsultationService = Depends(get_consultation_service)):
    """Lead counts per score bucket (hot, warm, cold, very_cold)."""
    stats = [LeadCategoryStats(**row) for row in await service.lead_stats()]
    return success_response("Lead statistics retrieved", stats)


@router.get("/{consultation_id}")
async def get_consultation(
    consultation_id: uuid.UUID,
    service: ConsultationService = Depends(get_consultation_service)
):
    consultation = await service.get(consultation_id)
    return success_response("Consultation retrieved", ConsultationResponse.model_validate(consultation))


@router.put("/{consultation_id}/status")
async def update_consultation_status(
    consultation_id: uuid.UUID,
    payload: ConsultationStatusUpdate,
    service: ConsultationService = Depends(get_consultation_service)
):
    consultation = await service.update_status(consultation_id, payload)
    return success_response(
        "Consultation status updated successfully",
        ConsultationStatusUpdated.model_validate(consultation)
    )
