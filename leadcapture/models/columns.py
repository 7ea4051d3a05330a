"""
Column helpers shared by the submission tables.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB


def utcnow() -> datetime:
    """Current time as timezone-aware UTC."""
    return datetime.now(timezone.utc)


def json_column() -> Column:
    """JSON column that uses JSONB on PostgreSQL."""
    return Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)


def datetime_column(nullable: bool = True, index: bool = False) -> Column:
    """Timezone-aware timestamp column (TIMESTAMPTZ on PostgreSQL)."""
    return Column(DateTime(timezone=True), nullable=nullable, index=index)
