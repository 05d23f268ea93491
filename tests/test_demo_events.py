"""Demo generator and fetchers."""

from datetime import date

import pandas as pd

from millops.services.data.demo_events import CAUSES, PLANT_LAYOUT, DemoEventGenerator
from millops.services.data.event_fetcher import DemoEventFetcher
from millops.services.filters.base import TransitionsFilters

WINDOW = TransitionsFilters(start_date=date(2024, 3, 1), end_date=date(2024, 3, 7))


class TestDemoEventGenerator:

    def test_deterministic(self):
        first = DemoEventGenerator(seed=7).generate(WINDOW)
        second = DemoEventGenerator(seed=7).generate(WINDOW)
        pd.testing.assert_frame_equal(first, second)

    def test_seed_changes_data(self):
        first = DemoEventGenerator(seed=1).generate(WINDOW)
        second = DemoEventGenerator(seed=2).generate(WINDOW)
        assert first["cause"].tolist() != second["cause"].tolist()

    def test_day_independent_of_window(self):
        one_day = TransitionsFilters(start_date=date(2024, 3, 3), end_date=date(2024, 3, 3))
        wide = DemoEventGenerator().generate(WINDOW)
        narrow = DemoEventGenerator().generate(one_day)
        in_wide = wide[wide["start_time"].dt.date == date(2024, 3, 3)]
        assert in_wide["cause"].tolist() == narrow["cause"].tolist()

    def test_dates_inside_window(self):
        df = DemoEventGenerator().generate(WINDOW)
        assert not df.empty
        assert df["start_time"].min().date() >= date(2024, 3, 1)
        assert df["start_time"].max().date() <= date(2024, 3, 7)

    def test_ordered_and_non_overlapping_per_line(self):
        df = DemoEventGenerator().generate(WINDOW)
        for _, line in df.groupby("line_id"):
            assert line["start_time"].is_monotonic_increasing
            assert (line["start_time"].iloc[1:].values >= line["end_time"].iloc[:-1].values).all()

    def test_mill_filter(self):
        filters = TransitionsFilters(mill="Mill 3", start_date=WINDOW.start_date, end_date=WINDOW.end_date)
        df = DemoEventGenerator().generate(filters)
        assert set(df["mill_id"]) == {"Mill 3"}
        assert set(df["line_id"]) == set(PLANT_LAYOUT["Mill 3"][1])

    def test_factory_filter(self):
        filters = TransitionsFilters(factory="Fremont, NE", start_date=WINDOW.start_date, end_date=WINDOW.end_date)
        df = DemoEventGenerator().generate(filters)
        assert set(df["mill_id"]) == {"Mill 3", "Mill 4"}

    def test_unknown_mill_is_empty(self):
        df = DemoEventGenerator().generate(TransitionsFilters(mill="Mill 99"))
        assert df.empty

    def test_category_follows_cause(self):
        df = DemoEventGenerator().generate(WINDOW)
        for cause, category in zip(df["cause"], df["category"]):
            assert CAUSES[cause] == category

    def test_default_window_uses_today(self):
        df = DemoEventGenerator(today=date(2024, 6, 30)).generate(TransitionsFilters())
        assert df["start_time"].max().date() <= date(2024, 6, 30)
        assert df["start_time"].min().date() >= date(2024, 5, 31)


class TestDemoEventFetcher:

    async def test_fetch_uses_generator(self):
        fetcher = DemoEventFetcher(DemoEventGenerator(seed=3))
        df = await fetcher.fetch_downtime_events(WINDOW)
        pd.testing.assert_frame_equal(df, DemoEventGenerator(seed=3).generate(WINDOW))
