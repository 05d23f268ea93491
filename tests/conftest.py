"""
Shared fixtures for the transitions test-suite.

Testing standards:
- Pure stages (builder, aggregator, ranker, assembler) get plain tests.
- Async pipeline tests rely on pytest-asyncio (auto mode in pyproject.toml).
- The HTTP layer is exercised through FastAPI's TestClient with the
  event fetcher dependency overridden by an in-memory fake.
"""

import os

# Keep test runs off the filesystem and off the demo generator.
os.environ["LOG_FILE"] = ""
os.environ["DEMO_MODE"] = "false"

from datetime import timedelta

import pandas as pd
import pytest

from millops.models.event_models import EVENT_COLUMNS

from tests.factories import BASE_TIME, event_row, make_events


@pytest.fixture
def scenario_events() -> pd.DataFrame:
    """Line A: X, X, Y. Line B: Y, Z. Line C: X (too short to transition)."""
    return make_events({"A": ["X", "X", "Y"], "B": ["Y", "Z"], "C": ["X"]})


@pytest.fixture
def full_events() -> pd.DataFrame:
    """Events with every dimension populated on two lines."""
    layout = {
        "L1": [("Jam", "Mechanical", "M-101"), ("Jam", "Mechanical", "M-102"),
               ("Power", "Electrical", "M-101"), ("Jam", "Mechanical", "M-101")],
        "L2": [("Power", "Electrical", "M-201"), ("Setup", "Operational", "M-201"),
               ("Jam", "Mechanical", "M-202")],
    }
    rows = []
    event_id = 1
    for line_id, events in layout.items():
        start = BASE_TIME
        for cause, category, equipment in events:
            rows.append(event_row(line_id, start, cause, category, equipment, event_id=event_id))
            event_id += 1
            start += timedelta(minutes=45)
    return pd.DataFrame(rows, columns=list(EVENT_COLUMNS))
