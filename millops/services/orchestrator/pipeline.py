"""
TransitionsOrchestrator — Thin coordinator for the transitions pipeline.

Single Responsibility: wire the phases together in order.
All heavy logic is delegated to specialized modules:

  Resolve   → FilterEngine        (``millops.services.filters.engine``)
  Fetch     → EventFetcher        (``millops.services.data.event_fetcher``)
  Analyze   → analyze_transitions (``millops.services.transitions.analysis``)
              builder → aggregator → ranker → matrix → assembler

The fetch is the only await; everything after it is synchronous.
Errors from either end (``InvalidParameter``, ``UpstreamFetchFailure``)
propagate unchanged to the caller.

Usage::

    from millops.services.orchestrator import transitions_orchestrator

    result = await transitions_orchestrator.execute(
        user_params={"grouping": "category", "topN": "5"},
        fetcher=fetcher,
    )
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from millops.services.data.event_fetcher import EventFetcher
from millops.services.filters.base import TransitionsFilters
from millops.services.filters.engine import filter_engine
from millops.services.transitions.analysis import analyze_transitions
from millops.services.transitions.assembler import TransitionsResult

logger = logging.getLogger(__name__)


class TransitionsOrchestrator:
    """
    Master coordinator — runs the full transitions pipeline.

    ``execute()`` flow:
      validate → fetch events → build sequences → aggregate
      → rank/truncate → assemble
    """

    async def execute(
        self,
        user_params: Mapping[str, Any],
        fetcher: EventFetcher,
    ) -> TransitionsResult:
        """
        Full pipeline from raw query params.

        Args:
            user_params: Raw (string) query parameters.
            fetcher:     Event store collaborator.

        Raises:
            InvalidParameter:     a parameter failed validation.
            UpstreamFetchFailure: the fetcher could not return events.
        """
        filters = filter_engine.resolve(user_params)
        return await self.execute_filters(filters, fetcher)

    async def execute_filters(
        self,
        filters: TransitionsFilters,
        fetcher: EventFetcher,
    ) -> TransitionsResult:
        """Pipeline for an already-validated filter set."""
        t0 = time.perf_counter()

        events = await fetcher.fetch_downtime_events(filters)
        result = analyze_transitions(events, filters)

        elapsed = time.perf_counter() - t0
        _log_summary(filters, len(events), result, elapsed)
        return result


# ─────────────────────────────────────────────────────────────────
# Private helpers (module-level functions — no state)
# ─────────────────────────────────────────────────────────────────

def _log_summary(
    filters: TransitionsFilters,
    event_count: int,
    result: TransitionsResult,
    elapsed: float,
) -> None:
    """Log a one-line summary of the completed pipeline."""
    logger.info(
        f"[Orchestrator] Completed in {elapsed:.2f}s — "
        f"{event_count} events, "
        f"{result.total_transitions} transitions, "
        f"{result.distinct_node_count} nodes "
        f"(grouping={filters.grouping.value}, topN={filters.top_n})"
    )


# ── Singleton ────────────────────────────────────────────────────
transitions_orchestrator = TransitionsOrchestrator()
