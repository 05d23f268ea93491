"""
SQL clause builders — Pure functions for dynamic WHERE construction.

Single Responsibility: build individual SQL fragments and their
parameter bindings from filter values.  No query orchestration, no
I/O.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Optional, Tuple

# Keyset cursor: (line_id, start_time, event_id) of the last row read
Cursor = Tuple[Any, datetime, int]


# ─────────────────────────────────────────────────────────────────
#  EQUALITY
# ─────────────────────────────────────────────────────────────────

def apply_equals(
    sql: str,
    params: Dict[str, Any],
    column: str,
    key: str,
    value: Optional[Any],
) -> str:
    """Append ``column = :key`` when *value* is set."""
    if value is None:
        return sql
    params[key] = value
    return f"{sql} AND {column} = :{key}"


# ─────────────────────────────────────────────────────────────────
#  DATERANGE
# ─────────────────────────────────────────────────────────────────

def apply_daterange(
    sql: str,
    params: Dict[str, Any],
    start_date: Optional[date],
    end_date: Optional[date],
    time_column: str = "start_time",
) -> str:
    """
    Append inclusive calendar-date bounds on *time_column*.

    The end bound is exclusive on the following midnight so events
    late on ``end_date`` (including fractional seconds) are kept.
    """
    start_dt, end_dt = parse_daterange(start_date, end_date)

    if start_dt:
        sql += f" AND {time_column} >= :start_dt"
        params["start_dt"] = start_dt
    if end_dt:
        sql += f" AND {time_column} < :end_dt"
        params["end_dt"] = end_dt

    return sql


def parse_daterange(
    start_date: Optional[date],
    end_date: Optional[date],
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """``(start 00:00, end + 1 day 00:00)`` — either may be ``None``."""
    start_dt = datetime.combine(start_date, time.min) if start_date else None
    end_dt = (
        datetime.combine(end_date + timedelta(days=1), time.min)
        if end_date else None
    )
    return start_dt, end_dt


# ─────────────────────────────────────────────────────────────────
#  KEYSET CURSOR
# ─────────────────────────────────────────────────────────────────

def apply_keyset_cursor(
    sql: str,
    params: Dict[str, Any],
    cursor: Optional[Cursor],
) -> str:
    """
    Append the "strictly after *cursor*" predicate for the
    ``(line_id, start_time, event_id)`` ordering.
    """
    if cursor is None:
        return sql
    line_id, start_time, event_id = cursor
    params["cur_line"] = line_id
    params["cur_start"] = start_time
    params["cur_id"] = event_id
    return (
        f"{sql} AND (line_id > :cur_line"
        " OR (line_id = :cur_line AND start_time > :cur_start)"
        " OR (line_id = :cur_line AND start_time = :cur_start"
        " AND event_id > :cur_id))"
    )
