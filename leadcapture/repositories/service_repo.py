"""
Service inquiry repository with value statistics.
"""
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func, desc

from leadcapture.models.choices import InquiryStatus
from leadcapture.models.service_inquiry import ServiceInquiry
from leadcapture.repositories.base import BaseRepository


def _money(value) -> float:
    return round(float(value), 2) if value is not None else 0.0


class ServiceInquiryRepository(BaseRepository[ServiceInquiry]):
    """Repository for ServiceInquiry operations."""

    sortable_fields = ("created_at", "estimated_value", "priority", "service_type")
    filter_fields = ("service_type", "status", "priority")

    def __init__(self, session: AsyncSession):
        super().__init__(ServiceInquiry, session)

    async def get_stats(self) -> dict:
        """Totals by status plus estimated and quoted value sums/averages."""
        stats = await self.aggregate(
            func.count().label("total"),
            *self.status_counts(InquiryStatus.ALL),
            func.sum(ServiceInquiry.estimated_value).label("total_estimated_value"),
            func.avg(ServiceInquiry.estimated_value).label("average_estimated_value"),
            func.sum(ServiceInquiry.quote_amount).label("total_quote_amount"),
            func.avg(ServiceInquiry.quote_amount).label("average_quote_amount"),
            *self.email_counts(),
        )
        for key in (
            "total_estimated_value",
            "average_estimated_value",
            "total_quote_amount",
            "average_quote_amount",
        ):
            stats[key] = _money(stats[key])
        return stats

    async def get_stats_by_service(self) -> List[dict]:
        """Count, value and completions per service type, largest total first."""
        total_value = func.sum(ServiceInquiry.estimated_value).label("total_value")
        query = (
            select(
                ServiceInquiry.service_type,
                func.count().label("count"),
                total_value,
                func.avg(ServiceInquiry.estimated_value).label("average_value"),
                self.count_when(ServiceInquiry.status == InquiryStatus.COMPLETED, "completed"),
            )
            .group_by(ServiceInquiry.service_type)
            .order_by(desc("total_value"))
        )
        result = await self.session.exec(query)

        return [
            {
                "service_type": row["service_type"],
                "count": row["count"],
                "total_value": _money(row["total_value"]),
                "average_value": _money(row["average_value"]),
                "completed": row["completed"],
            }
            for row in result.mappings().all()
        ]
