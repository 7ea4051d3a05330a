"""
Service inquiry API routes.
"""
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from leadcapture.api.deps import enforce_rate_limit, get_client_info, get_service_inquiry_service
from leadcapture.config import settings
from leadcapture.core.responses import success_response
from leadcapture.schemas.common import ERROR_RESPONSES
from leadcapture.schemas.service_inquiry import (
    InquiryStatusUpdate, InquiryStatusUpdated, ServiceInquiryCreate,
    ServiceInquiryListItem, ServiceInquiryResponse, ServiceInquirySubmitted,
    ServiceTypeInfo
)
from leadcapture.services.service_inquiry_service import ServiceInquiryService

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/services",
    tags=["services"],
    dependencies=[Depends(enforce_rate_limit)],
    responses=ERROR_RESPONSES
)


@router.post("/inquiry", status_code=201)
async def submit_inquiry(
    payload: ServiceInquiryCreate,
    client: dict = Depends(get_client_info),
    service: ServiceInquiryService = Depends(get_service_inquiry_service)
):
    """Submit a service inquiry. The response carries the estimated value."""
    inquiry = await service.create(payload, **client)
    return success_response(
        "Service inquiry submitted successfully",
        ServiceInquirySubmitted.model_validate(inquiry),
        status_code=201
    )


@router.get("/inquiry")
async def list_inquiries(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service_type: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort_by: str = Query("created_at", alias="sortBy"),
    sort_order: str = Query("DESC", alias="sortOrder"),
    service: ServiceInquiryService = Depends(get_service_inquiry_service)
):
    """List service inquiries. Unknown sortBy values fall back to created_at."""
    result = await service.list(
        {"service_type": service_type, "status": status, "priority": priority},
        page,
        limit,
        order_by=sort_by,
        order_desc=sort_order.upper() != "ASC"
    )
    items = [ServiceInquiryListItem.model_validate(i) for i in result["items"]]
    return success_response("Service inquiries retrieved", items, meta={"pagination": result["pagination"]})


@router.get("/stats/summary")
async def inquiry_stats(service: ServiceInquiryService = Depends(get_service_inquiry_service)):
    return success_response("Service inquiry statistics retrieved", await service.stats())


@router.get("/stats/by-service")
async def inquiry_stats_by_service(service: ServiceInquiryService = Depends(get_service_inquiry_service)):
    """Count and value per service type, largest total first."""
    return success_response("Service statistics by type retrieved", await service.stats_by_service())


@router.get("/types")
async def list_service_types():
    """Static service catalog."""
    types = [ServiceTypeInfo(**item) for item in ServiceInquiryService.service_types()]
    return success_response("Service types retrieved", types)


@router.get("/inquiry/{inquiry_id}")
async def get_inquiry(
    inquiry_id: uuid.UUID,
    service: ServiceInquiryService = Depends(get_service_inquiry_service)
):
    inquiry = await service.get(inquiry_id)
    return success_response("Service inquiry retrieved", ServiceInquiryResponse.model_validate(inquiry))


@router.put("/inquiry/{inquiry_id}/status")
async def update_inquiry_status(
    inquiry_id: uuid.UUID,
    payload: InquiryStatusUpdate,
    service: ServiceInquiryService = Depends(get_service_inquiry_service)
):
    inquiry = await service.update_status(inquiry_id, payload)
    return success_response(
        "Service inquiry status updated successfully",
        InquiryStatusUpdated.model_validate(inquiry)
    )
