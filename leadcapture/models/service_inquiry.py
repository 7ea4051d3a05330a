"""
Service inquiry model - project requests with an estimated deal value.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field

from leadcapture.models.columns import datetime_column, json_column, utcnow


class ServiceInquiry(SQLModel, table=True):
    """
    Service inquiry for a specific offering.
    estimated_value, priority and follow_up_date are computed once at creation.
    """
    __tablename__ = "service_inquiries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Contact info
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    company: Optional[str] = Field(default=None, max_length=100)

    # Project
    service_type: str = Field(index=True)
    project_description: str
    budget: str
    timeline: str
    current_website: Optional[str] = None
    current_challenges: Optional[str] = None
    specific_requirements: List[str] = Field(default_factory=list, sa_column=json_column())
    target_audience: Optional[str] = None
    competitor_websites: List[str] = Field(default_factory=list, sa_column=json_column())
    preferred_style: str = Field(default="not_sure")
    additional_services: List[str] = Field(default_factory=list, sa_column=json_column())

    # Lifecycle
    status: str = Field(default="new", index=True)  # new, reviewing, quoted, approved, in_progress, completed, cancelled
    priority: str = Field(default="low", index=True)  # low, medium, high
    estimated_value: float = Field(default=0.0, index=True)
    follow_up_date: Optional[datetime] = Field(default=None, sa_column=datetime_column())

    # Sales handling
    quote_sent: bool = Field(default=False)
    quote_sent_at: Optional[datetime] = Field(default=None, sa_column=datetime_column())
    quote_amount: Optional[float] = None
    assigned_to: Optional[str] = None
    notes: List[dict] = Field(default_factory=list, sa_column=json_column())

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
