"""
Event Store Models — downtime events.

Table: downtime_events (name overridable via ``EVENTS_TABLE``).

The analytics pipeline only reads this table; rows are written by
the plant-floor systems that own it.  The mapping documents the
columns the query builder relies on.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from millops.core.config import settings
from millops.core.database import EventsBase


class DowntimeEvent(EventsBase):
    """One recorded stoppage on a production line."""
    __tablename__ = settings.EVENTS_TABLE

    event_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    line_id: Mapped[str] = mapped_column(String(50), nullable=False)
    factory_id: Mapped[str] = mapped_column(String(100), nullable=False)
    mill_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    start_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    cause: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    equipment: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    __table_args__ = (
        Index("ix_downtime_line_start", "line_id", "start_time"),
    )


# Columns selected by the query builder, in canonical order.
EVENT_COLUMNS = (
    "event_id",
    "line_id",
    "factory_id",
    "mill_id",
    "start_time",
    "end_time",
    "cause",
    "category",
    "equipment",
)
