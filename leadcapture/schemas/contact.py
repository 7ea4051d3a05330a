"""
Contact schemas.
"""
import uuid
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """Contact form submission. Constraints are checked by the validator."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    source: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "subject": "Website redesign",
                "message": "We need a new website before our launch next month."
            }
        }


class ContactStatusUpdate(BaseModel):
    """Operator status change, optionally with a note."""
    status: Optional[str] = None
    notes: Optional[str] = None


class NoteEntry(BaseModel):
    content: str
    created_at: datetime
    created_by: str = "admin"


class ContactSubmitted(BaseModel):
    """Create response."""
    id: uuid.UUID
    name: str
    email: str
    subject: str
    status: str
    priority: str
    email_sent: bool
    admin_notified: bool
    submitted_at: datetime = Field(validation_alias="created_at")

    class Config:
        from_attributes = True


class ContactListItem(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    phone: Optional[str]
    company: Optional[str]
    subject: str
    status: str
    priority: str
    email_sent: bool
    admin_notified: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ContactResponse(ContactListItem):
    """Full contact."""
    message: str
    source: str
    email_sent_at: Optional[datetime]
    admin_notified_at: Optional[datetime]
    notes: List[NoteEntry]


class ContactStatusUpdated(BaseModel):
    id: uuid.UUID
    status: str
    notes: List[NoteEntry]
    updated_at: datetime

    class Config:
        from_attributes = True
