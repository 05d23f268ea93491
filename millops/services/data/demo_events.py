"""
Demo events — deterministic synthetic downtime log.

Used when ``DEMO_MODE`` is on (no event store configured).  Events are
generated per ``(line, day)`` from a seeded ``random.Random``, so the
same day always yields the same events regardless of the requested
window, and repeated requests return identical data.

Output honours the same contract as the database fetcher: mill,
factory and date filters applied, ordered by ``(line_id, start_time)``.
"""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

import pandas as pd

from millops.models.event_models import EVENT_COLUMNS
from millops.services.data.event_repository import empty_events
from millops.services.filters.base import TransitionsFilters

# mill → (factory, lines)
PLANT_LAYOUT: Dict[str, tuple] = {
    "Mill 1": ("Rochelle, IL", ("M1-L1", "M1-L2")),
    "Mill 2": ("Rochelle, IL", ("M2-L1", "M2-L2")),
    "Mill 3": ("Fremont, NE", ("M3-L1",)),
    "Mill 4": ("Fremont, NE", ("M4-L1", "M4-L2")),
}

# cause → category (categories are coarser than causes)
CAUSES: Dict[str, str] = {
    "Changeover": "Operational",
    "Material Shortage": "Material",
    "Equipment Failure": "Equipment",
    "Planned Maintenance": "Maintenance",
    "Quality Issue": "Quality",
    "Calibration": "Maintenance",
    "Power Outage": "Equipment",
    "Operator Training": "Operational",
}

EQUIPMENT = ("M-101", "M-102", "M-201", "M-202", "M-301", "M-302")

DEFAULT_WINDOW_DAYS = 30


class DemoEventGenerator:
    """Seeded generator of plausible, non-overlapping downtime events."""

    def __init__(self, seed: int = 42, today: Optional[date] = None) -> None:
        self.seed = seed
        self.today = today

    def generate(self, filters: TransitionsFilters) -> pd.DataFrame:
        store = filters.fetch_params
        end = store["end_date"] or self.today or date.today()
        start = store["start_date"] or (end - timedelta(days=DEFAULT_WINDOW_DAYS))

        rows: List[dict] = []
        event_id = 1
        for mill, (factory, lines) in PLANT_LAYOUT.items():
            if store["mill"] and store["mill"] != mill:
                continue
            if store["factory"] and store["factory"] != factory:
                continue
            for line_id in lines:
                day = start
                while day <= end:
                    for event in self._day_events(line_id, day):
                        event.update({
                            "event_id": event_id,
                            "line_id": line_id,
                            "factory_id": factory,
                            "mill_id": mill,
                        })
                        rows.append(event)
                        event_id += 1
                    day += timedelta(days=1)

        if not rows:
            return empty_events()

        df = pd.DataFrame(rows).reindex(columns=list(EVENT_COLUMNS))
        return df.sort_values(["line_id", "start_time"], kind="stable").reset_index(drop=True)

    def _day_events(self, line_id: str, day: date) -> List[dict]:
        rng = random.Random(f"{self.seed}:{line_id}:{day.isoformat()}")
        count = rng.randint(2, 8)

        events: List[dict] = []
        cursor = datetime.combine(day, datetime.min.time())
        day_end = cursor + timedelta(days=1)
        for _ in range(count):
            cursor += timedelta(minutes=rng.randint(20, 240))
            duration = timedelta(minutes=rng.randint(5, 125))
            if cursor + duration >= day_end:
                break
            cause = rng.choice(list(CAUSES))
            events.append({
                "start_time": cursor,
                "end_time": cursor + duration,
                "cause": cause,
                "category": CAUSES[cause],
                # roughly one stop in twenty has no equipment recorded
                "equipment": rng.choice(EQUIPMENT) if rng.random() > 0.05 else None,
            })
            cursor += duration

        return events
