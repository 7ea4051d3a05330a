"""
Consultation schemas.
"""
import uuid
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class ConsultationCreate(BaseModel):
    """Free consultation booking. Constraints are checked by the validator."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    industry: Optional[str] = None
    business_size: Optional[str] = None
    current_challenges: Optional[str] = None
    interested_services: Optional[List[str]] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    preferred_contact_method: Optional[str] = None
    preferred_time: Optional[str] = None
    timezone: Optional[str] = None
    additional_notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Smith",
                "email": "john@acme.com",
                "phone": "+1 555 123 4567",
                "company": "Acme Corp",
                "industry": "technology",
                "business_size": "51-200",
                "current_challenges": "Our support team cannot keep up with inbound requests.",
                "interested_services": ["smart_chatbots", "email_marketing"],
                "budget": "15k_50k",
                "timeline": "1_month"
            }
        }


class ConsultationStatusUpdate(BaseModel):
    status: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    consultation_notes: Optional[str] = None


class ConsultationSubmitted(BaseModel):
    """Create response."""
    id: uuid.UUID
    name: str
    email: str
    company: str
    status: str
    priority: str
    lead_score: int
    email_sent: bool
    admin_notified: bool
    follow_up_date: Optional[datetime]
    booked_at: datetime = Field(validation_alias="created_at")

    class Config:
        from_attributes = True


class ConsultationListItem(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    phone: str
    company: str
    industry: Optional[str]
    business_size: str
    budget: str
    timeline: str
    status: str
    priority: str
    lead_score: int
    scheduled_date: Optional[datetime]
    email_sent: bool
    admin_notified: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ConsultationResponse(ConsultationListItem):
    """Full consultation."""
    current_challenges: str
    interested_services: List[str]
    preferred_contact_method: str
    preferred_time: str
    timezone: Optional[str]
    additional_notes: Optional[str]
    consultation_notes: Optional[str]
    follow_up_required: bool
    follow_up_date: Optional[datetime]
    email_sent_at: Optional[datetime]
    admin_notified_at: Optional[datetime]


class ConsultationStatusUpdated(BaseModel):
    id: uuid.UUID
    status: str
    scheduled_date: Optional[datetime]
    consultation_notes: Optional[str]
    updated_at: datetime

    class Config:
        from_attributes = True


class LeadCategoryStats(BaseModel):
    lead_category: str  # hot, warm, cold, very_cold
    count: int
    average_score: float
