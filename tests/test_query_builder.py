"""QueryBuilder and SQL clause helpers."""

from datetime import date, datetime

from millops.services.data.query_builder import QueryBuilder, query_builder
from millops.services.data.sql_clauses import (
    apply_daterange,
    apply_equals,
    apply_keyset_cursor,
    parse_daterange,
)
from millops.services.filters.base import TransitionsFilters


class TestClauses:

    def test_equals_skips_none(self):
        params = {}
        assert apply_equals("SELECT 1 WHERE 1=1", params, "mill_id", "mill", None) == "SELECT 1 WHERE 1=1"
        assert params == {}

    def test_equals_binds_value(self):
        params = {}
        sql = apply_equals("W", params, "mill_id", "mill", "Mill 1")
        assert sql == "W AND mill_id = :mill"
        assert params == {"mill": "Mill 1"}

    def test_daterange_end_is_next_midnight(self):
        start_dt, end_dt = parse_daterange(date(2024, 2, 28), date(2024, 2, 29))
        assert start_dt == datetime(2024, 2, 28, 0, 0)
        assert end_dt == datetime(2024, 3, 1, 0, 0)

    def test_daterange_open_ended(self):
        params = {}
        sql = apply_daterange("W", params, None, date(2024, 1, 31))
        assert sql == "W AND start_time < :end_dt"
        assert params == {"end_dt": datetime(2024, 2, 1)}

    def test_keyset_cursor(self):
        params = {}
        sql = apply_keyset_cursor("W", params, ("L1", datetime(2024, 1, 1, 8), 17))
        assert "line_id > :cur_line" in sql
        assert "event_id > :cur_id" in sql
        assert params == {"cur_line": "L1", "cur_start": datetime(2024, 1, 1, 8), "cur_id": 17}


class TestQueryBuilder:

    def test_unfiltered_query(self):
        sql, params = query_builder.build_events_query(TransitionsFilters(), limit=500)
        assert sql.startswith("SELECT event_id, line_id, factory_id, mill_id, start_time")
        assert "FROM downtime_events WHERE 1=1" in sql
        assert sql.endswith("ORDER BY line_id, start_time, event_id LIMIT 500")
        assert params == {}

    def test_store_filters_are_bound(self):
        filters = TransitionsFilters(
            mill="Mill 2",
            factory="Fremont, NE",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 31),
        )
        sql, params = query_builder.build_events_query(filters)
        assert "mill_id = :mill" in sql
        assert "factory_id = :factory" in sql
        assert "start_time >= :start_dt" in sql
        assert params == {
            "mill": "Mill 2",
            "factory": "Fremont, NE",
            "start_dt": datetime(2024, 3, 1),
            "end_dt": datetime(2024, 4, 1),
        }

    def test_fetch_params_hold_store_filters_only(self):
        filters = TransitionsFilters(
            mill="Mill 1", from_value="X", top_n=2, start_date=date(2024, 3, 1),
        )
        assert filters.fetch_params == {
            "mill": "Mill 1",
            "factory": None,
            "start_date": date(2024, 3, 1),
            "end_date": None,
        }

    def test_analysis_filters_not_pushed_down(self):
        filters = TransitionsFilters(from_value="Jam", to_value="Power", top_n=3)
        sql, params = query_builder.build_events_query(filters)
        assert "cause" not in sql.split("WHERE", 1)[1]
        assert params == {}

    def test_custom_table(self):
        sql, _ = QueryBuilder(table_name="events_archive").build_events_query(TransitionsFilters())
        assert "FROM events_archive" in sql
