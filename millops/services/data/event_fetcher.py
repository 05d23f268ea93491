"""
Event fetchers — the collaborator the transitions pipeline reads from.

Contract: ``fetch_downtime_events(filters)`` returns a DataFrame of
events matching mill/factory/date filters, ordered by
``(line_id, start_time)``.  Only per-line ordering is guaranteed.

Implementations:
  DatabaseEventFetcher : hosted event store via SQLAlchemy (async).
  DemoEventFetcher     : deterministic synthetic data.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import pandas as pd

from millops.core.config import settings
from millops.core.database import DatabaseManager, db_manager
from millops.services.data.demo_events import DemoEventGenerator
from millops.services.data.event_repository import EventRepository, event_repository
from millops.services.filters.base import TransitionsFilters

logger = logging.getLogger(__name__)


class EventFetcher(Protocol):
    """Anything that can supply downtime events for a filter set."""

    async def fetch_downtime_events(
        self, filters: TransitionsFilters,
    ) -> pd.DataFrame:
        ...


class DatabaseEventFetcher:
    """Reads events from the hosted store, one session per call."""

    def __init__(
        self,
        manager: Optional[DatabaseManager] = None,
        repository: Optional[EventRepository] = None,
    ) -> None:
        self.manager = manager or db_manager
        self.repository = repository or event_repository

    async def fetch_downtime_events(
        self, filters: TransitionsFilters,
    ) -> pd.DataFrame:
        async with self.manager.get_session() as session:
            return await self.repository.fetch_events(session, filters)


class DemoEventFetcher:
    """Serves synthetic events — no database required."""

    def __init__(self, generator: Optional[DemoEventGenerator] = None) -> None:
        self.generator = generator or DemoEventGenerator(seed=settings.DEMO_SEED)

    async def fetch_downtime_events(
        self, filters: TransitionsFilters,
    ) -> pd.DataFrame:
        df = self.generator.generate(filters)
        logger.info(f"[DemoFetcher] {len(df)} synthetic events generated")
        return df
