"""
Contact model - general contact form submissions.
"""
import uuid
from datetime import datetime
from typing import Optional, List

from sqlmodel import SQLModel, Field

from leadcapture.models.columns import datetime_column, json_column, utcnow


class Contact(SQLModel, table=True):
    """
    Contact form submission.
    Priority is derived from urgency keywords in subject and message.
    """
    __tablename__ = "contacts"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Submitted fields
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    company: Optional[str] = Field(default=None, max_length=100)
    subject: str = Field(max_length=200)
    message: str
    source: str = Field(default="contact_form", max_length=50)

    # Lifecycle
    status: str = Field(default="new", index=True)  # new, in_progress, resolved, closed
    priority: str = Field(default="medium", index=True)  # medium, high, urgent

    # Operator notes
    notes: List[dict] = Field(default_factory=list, sa_column=json_column())
    # Example: [{"content": "Called back", "created_at": "...", "created_by": "admin"}]

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
