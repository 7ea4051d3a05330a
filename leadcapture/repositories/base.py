"""
Base repository with generic CRUD, listing and email-status operations.
"""
import uuid
from typing import TypeVar, Generic, Type, Optional, List, Sequence

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func, case

from leadcapture.core.pagination import create_paginated_response
from leadcapture.models.columns import utcnow

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository for the submission tables.
    Inherit and specify the model class and its sortable columns.
    """

    sortable_fields: Sequence[str] = ("created_at",)
    filter_fields: Sequence[str] = ("status", "priority")

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def create(self, obj_in: dict) -> ModelType:
        """Insert a record and return it with id and timestamps populated."""
        db_obj = self.model(**obj_in)
        self.session.add(db_obj)
        await self.session.commit()
        await self.session.refresh(db_obj)
        return db_obj

    async def get(self, id: uuid.UUID) -> Optional[ModelType]:
        """Get a record by ID."""
        return await self.session.get(self.model, id)

    def _apply_filters(self, query, filters: Optional[dict]):
        if filters:
            for field, value in filters.items():
                if field in self.filter_fields and value:
                    query = query.where(getattr(self.model, field) == value)
        return query

    async def list_paginated(
        self,
        filters: Optional[dict] = None,
        page: int = 1,
        limit: int = 10,
        order_by: str = "created_at",
        order_desc: bool = True
    ) -> dict:
        """List records with filtering, whitelisted sorting and pagination."""
        query = self._apply_filters(select(self.model), filters)

        # Get total count
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await self.session.exec(count_query)
        total = total_result.one()

        # Unknown sort fields fall back to created_at
        if order_by not in self.sortable_fields:
            order_by = "created_at"
        order_column = getattr(self.model, order_by)
        query = query.order_by(order_column.desc() if order_desc else order_column.asc())

        # Apply pagination
        offset = (page - 1) * limit
        query = query.offset(offset).limit(limit)

        result = await self.session.exec(query)
        items = result.all()

        return create_paginated_response(items, total, page, limit)

    async def update(self, id: uuid.UUID, obj_in: dict) -> Optional[ModelType]:
        """Partial update; None values are skipped."""
        db_obj = await self.get(id)
        if not db_obj:
            return None

        for field, value in obj_in.items():
            if field in self.model.model_fields and field != "id" and value is not None:
                setattr(db_obj, field, value)

        db_obj.updated_at = utcnow()

        self.session.add(db_obj)
        await self.session.commit()
        await self.session.refresh(db_obj)
        return db_obj

    async def mark_email_status(
        self,
        id: uuid.UUID,
        user_sent: bool,
        admin_sent: bool
    ) -> Optional[ModelType]:
        """
        Record successful deliveries.

        Only flips flags from False to True; flags that are already set and
        failed sends are left untouched.
        """
        db_obj = await self.get(id)
        if not db_obj:
            return None

        now = utcnow()
        changed = False

        if user_sent and not db_obj.email_sent:
            db_obj.email_sent = True
            db_obj.email_sent_at = now
            changed = True

        if admin_sent and not db_obj.admin_notified:
            db_obj.admin_notified = True
            db_obj.admin_notified_at = now
            changed = True

        if changed:
            self.session.add(db_obj)
            await self.session.commit()
            await self.session.refresh(db_obj)

        return db_obj

    async def count(self, filters: Optional[dict] = None) -> int:
        """Count records."""
        query = self._apply_filters(select(func.count()).select_from(self.model), filters)
        result = await self.session.exec(query)
        return result.one()

    def count_when(self, condition, label: str):
        """COUNT(CASE WHEN condition THEN 1 END) column."""
        return func.count(case((condition, 1))).label(label)

    def status_counts(self, statuses: Sequence[str]) -> List:
        """One COUNT(CASE ...) column per status value."""
        return [self.count_when(self.model.status == status, status) for status in statuses]

    def email_counts(self) -> List:
        return [
            self.count_when(self.model.email_sent == True, "emails_sent"),  # noqa: E712
            self.count_when(self.model.admin_notified == True, "admin_notified"),  # noqa: E712
        ]

    async def aggregate(self, *columns) -> dict:
        """Run a single-row aggregate query and return it as a dict."""
        result = await self.session.exec(select(*columns).select_from(self.model))
        return dict(result.mappings().one())
