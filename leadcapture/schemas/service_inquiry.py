"""
Service inquiry schemas.
"""
import uuid
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from leadcapture.schemas.contact import NoteEntry


class ServiceInquiryCreate(BaseModel):
    """Service inquiry. Constraints are checked by the validator."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    service_type: Optional[str] = None
    project_description: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    current_website: Optional[str] = None
    current_challenges: Optional[str] = None
    specific_requirements: Optional[List[str]] = None
    target_audience: Optional[str] = None
    competitor_websites: Optional[List[str]] = None
    preferred_style: Optional[str] = None
    additional_services: Optional[List[str]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Maria Lopez",
                "email": "maria@shop.io",
                "service_type": "ai_website",
                "project_description": "Replace our storefront with an AI-assisted catalogue site.",
                "budget": "15k_50k",
                "timeline": "3_months",
                "additional_services": ["seo", "hosting"]
            }
        }


class InquiryStatusUpdate(BaseModel):
    status: Optional[str] = None
    quote_amount: Optional[float] = Field(default=None, ge=0)
    assigned_to: Optional[str] = None
    notes: Optional[str] = None


class ServiceInquirySubmitted(BaseModel):
    """Create response."""
    id: uuid.UUID
    name: str
    email: str
    service_type: str
    status: str
    priority: str
    estimated_value: float
    email_sent: bool
    admin_notified: bool
    follow_up_date: Optional[datetime]
    submitted_at: datetime = Field(validation_alias="created_at")

    class Config:
        from_attributes = True


class ServiceInquiryListItem(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    phone: Optional[str]
    company: Optional[str]
    service_type: str
    budget: str
    timeline: str
    status: str
    priority: str
    estimated_value: float
    quote_sent: bool
    quote_amount: Optional[float]
    assigned_to: Optional[str]
    email_sent: bool
    admin_notified: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ServiceInquiryResponse(ServiceInquiryListItem):
    """Full service inquiry."""
    project_description: str
    current_website: Optional[str]
    current_challenges: Optional[str]
    specific_requirements: List[str]
    target_audience: Optional[str]
    competitor_websites: List[str]
    preferred_style: str
    additional_services: List[str]
    quote_sent_at: Optional[datetime]
    follow_up_date: Optional[datetime]
    email_sent_at: Optional[datetime]
    admin_notified_at: Optional[datetime]
    notes: List[NoteEntry]


class InquiryStatusUpdated(BaseModel):
    id: uuid.UUID
    status: str
    quote_amount: Optional[float]
    quote_sent: bool
    assigned_to: Optional[str]
    updated_at: datetime

    class Config:
        from_attributes = True


class ServiceTypeInfo(BaseModel):
    id: str
    name: str
    description: str
    base_price: int
    features: List[str]
