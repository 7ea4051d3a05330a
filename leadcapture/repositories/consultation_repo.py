"""
Consultation repository with lead-score statistics.
"""
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func, case, desc, literal_column

from leadcapture.models.choices import ConsultationStatus, Priority
from leadcapture.models.consultation import Consultation
from leadcapture.repositories.base import BaseRepository


class ConsultationRepository(BaseRepository[Consultation]):
    """Repository for Consultation operations."""

    sortable_fields = ("created_at", "lead_score", "scheduled_date", "priority")

    def __init__(self, session: AsyncSession):
        super().__init__(Consultation, session)

    async def get_stats(self) -> dict:
        """Totals by status, high-priority count and average lead score."""
        stats = await self.aggregate(
            func.count().label("total"),
            *self.status_counts(ConsultationStatus.ALL),
            self.count_when(Consultation.priority == Priority.HIGH, "high_priority"),
            func.avg(Consultation.lead_score).label("average_lead_score"),
            *self.email_counts(),
        )
        average = stats["average_lead_score"]
        stats["average_lead_score"] = round(float(average), 2) if average is not None else None
        return stats

    async def get_lead_stats(self) -> List[dict]:
        """Consultations bucketed by lead score: hot, warm, cold, very_cold."""
        category = case(
            (Consultation.lead_score >= 80, "hot"),
            (Consultation.lead_score >= 60, "warm"),
            (Consultation.lead_score >= 40, "cold"),
            else_="very_cold",
        )
        query = (
            select(
                category.label("lead_category"),
                func.count().label("count"),
                func.avg(Consultation.lead_score).label("average_score"),
            )
            .group_by(literal_column("lead_category"))
            .order_by(desc("average_score"))
        )
        result = await self.session.exec(query)

        return [
            {
                "lead_category": row["lead_category"],
                "count": row["count"],
                "average_score": round(float(row["average_score"]), 2),
            }
            for row in result.mappings().all()
        ]
