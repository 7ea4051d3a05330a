"""
Consultation model - free consultation bookings with lead scoring.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field

from leadcapture.models.columns import datetime_column, json_column, utcnow


class Consultation(SQLModel, table=True):
    """
    Free consultation booking.
    lead_score, priority and follow_up_date are computed once at creation.
    """
    __tablename__ = "consultations"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Contact info
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    phone: str = Field(max_length=20)
    company: str = Field(max_length=100)

    # Business profile
    industry: Optional[str] = Field(default=None, max_length=100)
    business_size: str  # 1-10, 11-50, 51-200, 201-500, 500+
    current_challenges: str
    interested_services: List[str] = Field(default_factory=list, sa_column=json_column())
    budget: str
    timeline: str

    # Scheduling preferences
    preferred_contact_method: str = Field(default="email")
    preferred_time: str = Field(default="flexible")
    timezone: Optional[str] = None
    additional_notes: Optional[str] = None

    # Lifecycle
    status: str = Field(default="pending", index=True)  # pending, scheduled, completed, cancelled, no_show
    priority: str = Field(default="low", index=True)  # low, medium, high
    lead_score: int = Field(default=0, index=True)
    scheduled_date: Optional[datetime] = Field(default=None, sa_column=datetime_column())
    consultation_notes: Optional[str] = None
    follow_up_required: bool = Field(default=True)
    follow_up_date: Optional[datetime] = Field(default=None, sa_column=datetime_column())

    # Request context
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    # Email delivery
    email_sent: bool = Field(default=False)
    email_sent_at: Optional[datetime] = Field(default=None, sa_column=datetime_column())
    admin_notified: bool = Field(default=False)
    admin_notified_at: Optional[datetime] = Field(default=None, sa_column=datetime_column())

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=datetime_column(nullable=False, index=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=datetime_column(nullable=False))
