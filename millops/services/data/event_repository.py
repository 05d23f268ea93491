"""
EventRepository — Keyset-paginated fetch from the downtime events table.

Single Responsibility: execute event queries built by QueryBuilder and
return a ``pd.DataFrame`` in the canonical event schema, ordered by
``(line_id, start_time)``.

Database errors are not swallowed: they surface as
``UpstreamFetchFailure`` and are never retried here.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pandas as pd
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from millops.core.config import settings
from millops.core.errors import UpstreamFetchFailure
from millops.models.event_models import EVENT_COLUMNS
from millops.services.data.query_builder import QueryBuilder, query_builder
from millops.services.data.sql_clauses import Cursor
from millops.services.filters.base import TransitionsFilters

logger = logging.getLogger(__name__)


def empty_events() -> pd.DataFrame:
    """Return an empty DataFrame with the canonical event schema."""
    return pd.DataFrame(columns=list(EVENT_COLUMNS))


class EventRepository:
    """
    Executes event queries with keyset pagination.

    Returns DataFrames with columns:
    ``event_id, line_id, factory_id, mill_id, start_time, end_time,
    cause, category, equipment``
    """

    def __init__(
        self,
        builder: Optional[QueryBuilder] = None,
        max_rows: Optional[int] = None,
        batch_size: Optional[int] = None,
    ) -> None:
        self.builder = builder or query_builder
        self.max_rows = max_rows or settings.TRANSITIONS_MAX_EVENTS
        self.batch_size = batch_size or settings.TRANSITIONS_BATCH_SIZE

    async def fetch_events(
        self,
        session: AsyncSession,
        filters: TransitionsFilters,
    ) -> pd.DataFrame:
        """
        Fetch every event matching *filters*, page by page, up to
        ``max_rows``.

        Raises:
            UpstreamFetchFailure: the store rejected or failed a query.
        """
        all_frames: List[pd.DataFrame] = []
        cursor: Optional[Cursor] = None
        total_fetched = 0

        while total_fetched < self.max_rows:
            remaining = self.max_rows - total_fetched
            batch_limit = min(self.batch_size, remaining)

            sql, params = self.builder.build_events_query(
                filters, cursor=cursor, limit=batch_limit,
            )

            try:
                result = await session.execute(text(sql), params)
                rows = result.mappings().all()
            except (SQLAlchemyError, OSError) as exc:
                logger.error(
                    f"[EventRepo] Error querying {self.builder.table_name}: {exc}"
                )
                raise UpstreamFetchFailure(
                    f"Could not read downtime events: {exc}",
                ) from exc

            if not rows:
                break

            batch_df = pd.DataFrame([dict(r) for r in rows])
            all_frames.append(batch_df)

            last = batch_df.iloc[-1]
            cursor = (last["line_id"], last["start_time"], int(last["event_id"]))
            total_fetched += len(rows)

            if len(rows) < batch_limit:
                break

        if total_fetched >= self.max_rows:
            logger.warning(
                f"[EventRepo] Hit maximum event limit ({self.max_rows}). "
                "Consider narrowing the date range or adding filters."
            )

        if not all_frames:
            return empty_events()

        combined = pd.concat(all_frames, ignore_index=True)
        combined = combined.reindex(columns=list(EVENT_COLUMNS))
        for col in ("start_time", "end_time"):
            combined[col] = pd.to_datetime(combined[col])

        logger.info(
            f"[EventRepo] {self.builder.table_name}: {len(combined)} events fetched"
        )
        return combined


# ── Singleton ────────────────────────────────────────────────────
event_repository = EventRepository()
