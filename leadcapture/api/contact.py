"""
Contact API routes.
"""
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from leadcapture.api.deps import enforce_rate_limit, get_client_info, get_contact_service
from leadcapture.config import settings
from leadcapture.core.responses import success_response
from leadcapture.schemas.common import ERROR_RESPONSES
from leadcapture.schemas.contact import (
    ContactCreate, ContactListItem, ContactResponse, ContactStatusUpdate,
    ContactStatusUpdated, ContactSubmitted
)
from leadcapture.services.contact_service import ContactService

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/contact",
    tags=["contact"],
    dependencies=[Depends(enforce_rate_limit)],
    responses=ERROR_RESPONSES
)


@router.post("", status_code=201)
async def submit_contact(
    payload: ContactCreate,
    client: dict = Depends(get_client_info),
    service: ContactService = Depends(get_contact_service)
):
    """Submit the contact form."""
    contact = await service.create(payload, **client)
    return success_response(
        "Contact form submitted successfully",
        ContactSubmitted.model_validate(contact),
        status_code=201
    )


@router.get("")
async def list_contacts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status: Optional[str] = None,
    priority: Optional[str] = None,
    service: ContactService = Depends(get_contact_service)
):
    """List contacts, newest first."""
    result = await service.list({"status": status, "priority": priority}, page, limit)
    items = [ContactListItem.model_validate(c) for c in result["items"]]
    return success_response("Contacts retrieved", items, meta={"pagination": result["pagination"]})


@router.get("/stats/summary")
async def contact_stats(service: ContactService = Depends(get_contact_service)):
    """Get contact statistics."""
    return success_response("Contact statistics retrieved", await service.stats())


@router.get("/{contact_id}")
async def get_contact(
    contact_id: uuid.UUID,
    service: ContactService = Depends(get_contact_service)
):
    contact = await service.get(contact_id)
    return success_response("Contact retrieved", ContactResponse.model_validate(contact))


@router.put("/{contact_id}/status")
async def update_contact_status(
    contact_id: uuid.UUID,
    payload: ContactStatusUpdate,
    service: ContactService = Depends(get_contact_service)
):
    """Update status, optionally appending an admin note."""
    contact = await service.update_status(contact_id, payload)
    return success_response(
        "Contact status updated successfully",
        ContactStatusUpdated.model_validate(contact)
    )
