"""
Contact repository.
"""
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func

from leadcapture.models.choices import ContactStatus, Priority
from leadcapture.models.contact import Contact
from leadcapture.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact operations."""

    sortable_fields = ("created_at",)

    def __init__(self, session: AsyncSession):
        super().__init__(Contact, session)

    async def get_stats(self) -> dict:
        """Totals by status plus email delivery counts."""
        return await self.aggregate(
            func.count().label("total"),
            *self.status_counts(ContactStatus.ALL),
            self.count_when(Contact.priority == Priority.URGENT, "urgent_priority"),
            *self.email_counts(),
        )
