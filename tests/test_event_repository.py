"""EventRepository — keyset pagination and error propagation."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from millops.core.errors import UpstreamFetchFailure
from millops.models.event_models import EVENT_COLUMNS
from millops.services.data.event_repository import EventRepository
from millops.services.filters.base import TransitionsFilters


def _rows(n, line_id="L1"):
    start = datetime(2024, 3, 1, 6, 0)
    return [
        {
            "event_id": i + 1,
            "line_id": line_id,
            "factory_id": "Rochelle, IL",
            "mill_id": "Mill 1",
            "start_time": start + timedelta(hours=i),
            "end_time": start + timedelta(hours=i, minutes=15),
            "cause": "Changeover",
            "category": "Operational",
            "equipment": None,
        }
        for i in range(n)
    ]


class _Result:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return self._rows


class FakeSession:
    """Serves pre-canned pages and records every statement."""

    def __init__(self, pages):
        self.pages = list(pages)
        self.calls = []

    async def execute(self, statement, params=None):
        self.calls.append((str(statement), dict(params or {})))
        return _Result(self.pages.pop(0) if self.pages else [])


class BrokenSession:
    async def execute(self, statement, params=None):
        raise OperationalError("SELECT", {}, Exception("connection refused"))


class TestFetchEvents:

    async def test_pages_until_short_batch(self):
        rows = _rows(3)
        session = FakeSession([rows[:2], rows[2:]])
        repo = EventRepository(max_rows=100, batch_size=2)

        df = await repo.fetch_events(session, TransitionsFilters())

        assert list(df.columns) == list(EVENT_COLUMNS)
        assert df["event_id"].tolist() == [1, 2, 3]
        assert len(session.calls) == 2
        second_sql, second_params = session.calls[1]
        assert "cur_line" in second_sql
        assert second_params["cur_line"] == "L1"
        assert second_params["cur_id"] == 2

    async def test_stops_at_cap(self):
        session = FakeSession([_rows(2), _rows(2)])
        repo = EventRepository(max_rows=2, batch_size=5)

        df = await repo.fetch_events(session, TransitionsFilters())

        assert len(df) == 2
        assert len(session.calls) == 1
        assert session.calls[0][0].endswith("LIMIT 2")

    async def test_no_rows_returns_empty_schema(self):
        repo = EventRepository(max_rows=10, batch_size=5)
        df = await repo.fetch_events(FakeSession([]), TransitionsFilters())
        assert df.empty
        assert list(df.columns) == list(EVENT_COLUMNS)

    async def test_times_are_datetimes(self):
        repo = EventRepository(max_rows=10, batch_size=5)
        df = await repo.fetch_events(FakeSession([_rows(2)]), TransitionsFilters())
        assert str(df["start_time"].dtype).startswith("datetime64")

    async def test_database_error_surfaces(self):
        repo = EventRepository(max_rows=10, batch_size=5)
        with pytest.raises(UpstreamFetchFailure) as exc_info:
            await repo.fetch_events(BrokenSession(), TransitionsFilters())
        assert exc_info.value.kind == "UpstreamFetchFailure"
        assert isinstance(exc_info.value.__cause__, OperationalError)
