"""
Transitions analysis — the pure part of the pipeline.

Builder → Aggregator → Ranker → Matrix → Assembler for one filter set
over an in-memory events DataFrame.  No I/O, no awaits.
"""

from __future__ import annotations

import pandas as pd

from millops.services.filters.base import TransitionsFilters
from millops.services.transitions.aggregator import aggregate_transitions
from millops.services.transitions.assembler import ResultAssembler, TransitionsResult
from millops.services.transitions.matrix import build_matrix
from millops.services.transitions.ranker import rank_transitions, truncate
from millops.services.transitions.sequence_builder import build_sequences


def analyze_transitions(
    events: pd.DataFrame,
    filters: TransitionsFilters,
) -> TransitionsResult:
    """
    Compute the transitions result for already-fetched events.

    Args:
        events:  Events in the canonical schema, ordered per line.
        filters: Validated request.

    Returns:
        ``TransitionsResult`` (empty when no pair qualifies).
    """
    sequences = build_sequences(events, filters.grouping)

    aggregated = aggregate_transitions(
        sequences,
        from_value=filters.from_value,
        to_value=filters.to_value,
        include_self=filters.include_self,
        collect_pairs=filters.include_pairs,
    )

    total = aggregated.total
    pairs = aggregated.pairs if filters.include_pairs else None
    if total == 0:
        return ResultAssembler.empty(filters.grouping, with_pairs=pairs is not None)

    ranked = rank_transitions(aggregated.counts)
    kept, other = truncate(ranked, filters.top_n)

    return ResultAssembler.assemble(
        grouping=filters.grouping,
        kept=kept,
        other=other,
        total=total,
        distinct_nodes=len(aggregated.nodes),
        matrix=build_matrix(aggregated.counts, filters.top_n),
        event_pairs=pairs,
    )
