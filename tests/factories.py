"""Event-frame builders and fake fetchers shared by the test modules."""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

import pandas as pd

from millops.core.errors import UpstreamFetchFailure
from millops.models.event_models import EVENT_COLUMNS
from millops.services.filters.base import TransitionsFilters

BASE_TIME = datetime(2024, 3, 4, 6, 0)


def event_row(
    line_id: str,
    start: datetime,
    cause: Optional[str] = None,
    category: Optional[str] = None,
    equipment: Optional[str] = None,
    minutes: int = 10,
    event_id: int = 0,
    mill: str = "Mill 1",
    factory: str = "Rochelle, IL",
) -> dict:
    return {
        "event_id": event_id,
        "line_id": line_id,
        "factory_id": factory,
        "mill_id": mill,
        "start_time": start,
        "end_time": start + timedelta(minutes=minutes),
        "cause": cause,
        "category": category,
        "equipment": equipment,
    }


def make_events(lines: Dict[str, List[Optional[str]]], column: str = "cause") -> pd.DataFrame:
    """
    Build an events DataFrame from ``{line_id: [value, ...]}``.

    Each value fills *column*; events on a line are 40 minutes apart
    and last 10 minutes.
    """
    rows = []
    event_id = 1
    for line_id, values in lines.items():
        start = BASE_TIME
        for value in values:
            row = event_row(line_id, start, event_id=event_id)
            row[column] = value
            rows.append(row)
            event_id += 1
            start += timedelta(minutes=40)
    return pd.DataFrame(rows, columns=list(EVENT_COLUMNS))


class FakeFetcher:
    """In-memory EventFetcher that records the filters it was asked for."""

    def __init__(self, events: pd.DataFrame) -> None:
        self.events = events
        self.calls: List[TransitionsFilters] = []

    async def fetch_downtime_events(self, filters: TransitionsFilters) -> pd.DataFrame:
        self.calls.append(filters)
        return self.events


class FailingFetcher:
    """EventFetcher whose store is down."""

    async def fetch_downtime_events(self, filters: TransitionsFilters) -> pd.DataFrame:
        raise UpstreamFetchFailure("event store unavailable")
