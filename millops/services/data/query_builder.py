"""
QueryBuilder — Dynamic SQL construction for the downtime events table.

Single Responsibility: compose complete parameterized queries from a
``TransitionsFilters``.  Clause-level logic lives in ``sql_clauses``.

Usage::

    from millops.services.data.query_builder import query_builder

    sql, params = query_builder.build_events_query(filters, limit=10_000)
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from millops.models.event_models import EVENT_COLUMNS, DowntimeEvent
from millops.services.data.sql_clauses import (
    Cursor,
    apply_daterange,
    apply_equals,
    apply_keyset_cursor,
)
from millops.services.filters.base import TransitionsFilters

# Type alias for the (sql_string, bind_params) return
QueryResult = Tuple[str, Dict[str, Any]]


class QueryBuilder:
    """
    Constructs parameterized SQL for the events table.

    Stateless — every method returns a fresh ``(sql, bind_params)`` tuple.
    """

    ORDER_BY = "line_id, start_time, event_id"

    def __init__(self, table_name: Optional[str] = None) -> None:
        self.table_name = table_name or DowntimeEvent.__tablename__

    def build_events_query(
        self,
        filters: TransitionsFilters,
        cursor: Optional[Cursor] = None,
        limit: int = 10_000,
    ) -> QueryResult:
        """
        Build one keyset page of events matching mill/factory/date filters,
        ordered by ``(line_id, start_time, event_id)``.
        """
        cols = ", ".join(EVENT_COLUMNS)
        sql = f"SELECT {cols} FROM {self.table_name} WHERE 1=1"
        params: Dict[str, Any] = {}

        sql = self._apply_filters(sql, params, filters)
        sql = apply_keyset_cursor(sql, params, cursor)
        sql += f" ORDER BY {self.ORDER_BY} LIMIT {int(limit)}"

        return sql, params

    @staticmethod
    def _apply_filters(
        sql: str,
        params: Dict[str, Any],
        filters: TransitionsFilters,
    ) -> str:
        store = filters.fetch_params
        sql = apply_equals(sql, params, "mill_id", "mill", store["mill"])
        sql = apply_equals(sql, params, "factory_id", "factory", store["factory"])
        return apply_daterange(
            sql, params, store["start_date"], store["end_date"],
        )


# ── Singleton ────────────────────────────────────────────────────
query_builder = QueryBuilder()
