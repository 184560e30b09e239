"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class CreationDateMixin:
    """Mixin to add the `date` creation timestamp column."""

    # Set client-side so rows created within the same second still order correctly
    date = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
