"""
Sequence builder — per-line ordered node sequences.

Single Responsibility: turn the fetched events DataFrame into explicit
``LineSequence`` values.  Only per-line ordering is relied upon: rows
are grouped by ``line_id`` and kept in arrival order within each line.

Events without a value for the active grouping dimension are dropped
from their line's sequence; they never become a node.  Events without
a ``line_id`` belong to no sequence and are skipped with a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator, List, Optional, Tuple

import pandas as pd

from millops.services.transitions.grouping import GroupingDimension, node_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceStep:
    """One node occurrence on a line, with the timing of its event."""
    node: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


@dataclass(frozen=True)
class LineSequence:
    """Ordered node values observed on one production line."""
    line_id: str
    steps: Tuple[SequenceStep, ...]

    @property
    def nodes(self) -> List[str]:
        return [s.node for s in self.steps]

    def __len__(self) -> int:
        return len(self.steps)

    def adjacent(self) -> Iterator[Tuple[SequenceStep, SequenceStep]]:
        """Consecutive ``(previous, next)`` steps."""
        return zip(self.steps, self.steps[1:])


def build_sequences(
    events: pd.DataFrame,
    grouping: GroupingDimension,
) -> List[LineSequence]:
    """
    Group events by line and map each to its node value.

    Args:
        events:   Events in the canonical schema (``line_id``,
                  ``start_time``, ``end_time`` and the dimension
                  columns).  Ordered per line.
        grouping: Active grouping dimension.

    Returns:
        One ``LineSequence`` per line, in order of first appearance.
        Lines whose events all lack the dimension get an empty sequence.
    """
    if events.empty or "line_id" not in events.columns:
        return []

    column = grouping.column
    has_column = column in events.columns
    has_start = "start_time" in events.columns
    has_end = "end_time" in events.columns

    orphans = int(events["line_id"].isna().sum())
    if orphans:
        logger.warning(
            f"[SequenceBuilder] Skipped {orphans} events without a line_id"
        )

    sequences: List[LineSequence] = []
    # null line_id rows are dropped here; counted above
    for line_id, line_df in events.groupby("line_id", sort=False, dropna=True):
        steps: List[SequenceStep] = []
        for row in line_df.itertuples(index=False):
            node = node_value(getattr(row, column)) if has_column else None
            if node is None:
                continue
            steps.append(SequenceStep(
                node=node,
                start_time=_to_datetime(row.start_time) if has_start else None,
                end_time=_to_datetime(row.end_time) if has_end else None,
            ))
        sequences.append(LineSequence(line_id=str(line_id), steps=tuple(steps)))

    return sequences


def _to_datetime(value: Any) -> Optional[datetime]:
    """Coerce a cell to ``datetime`` (``None`` for NaT / missing)."""
    if value is None or pd.isna(value):
        return None
    return pd.Timestamp(value).to_pydatetime()
