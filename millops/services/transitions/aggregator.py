"""
Transition aggregator — pooled consecutive-pair counts.

Single Responsibility: walk every line's sequence, count ordered
``(from, to)`` pairs across all lines combined.

``from_value`` / ``to_value`` are applied while counting, so the
total (and every percentage derived from it) describes the
constrained population, not the unfiltered one.

Counting is a sum of per-line ``Counter`` objects: the result is
independent of the order in which lines are processed, and partial
results from separate workers can be combined with ``merge``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from millops.services.transitions.sequence_builder import LineSequence, SequenceStep

Pair = Tuple[str, str]


@dataclass(frozen=True)
class EventPair:
    """The two consecutive events behind one counted transition."""
    line_id: str
    from_node: str
    to_node: str
    from_start: Optional[datetime]
    to_start: Optional[datetime]
    running_minutes: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lineId": self.line_id,
            "from": self.from_node,
            "to": self.to_node,
            "fromStart": self.from_start.isoformat() if self.from_start else None,
            "toStart": self.to_start.isoformat() if self.to_start else None,
            "runningMinutes": self.running_minutes,
        }


@dataclass
class TransitionCounts:
    """Aggregated pair counts plus the optional event pairs behind them."""
    counts: Counter = field(default_factory=Counter)
    pairs: List[EventPair] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def distinct_transitions(self) -> int:
        return len(self.counts)

    @property
    def nodes(self) -> Set[str]:
        """Unique values seen as either end of a counted transition."""
        seen: Set[str] = set()
        for from_node, to_node in self.counts:
            seen.add(from_node)
            seen.add(to_node)
        return seen

    def merge(self, other: "TransitionCounts") -> "TransitionCounts":
        """Combine two partial aggregations (order-independent for counts)."""
        return TransitionCounts(
            counts=self.counts + other.counts,
            pairs=self.pairs + other.pairs,
        )


def aggregate_transitions(
    sequences: Iterable[LineSequence],
    from_value: Optional[str] = None,
    to_value: Optional[str] = None,
    include_self: bool = True,
    collect_pairs: bool = False,
) -> TransitionCounts:
    """
    Count consecutive-pair transitions across all lines.

    Args:
        sequences:     Per-line sequences from ``build_sequences``.
        from_value:    Only count pairs leaving this node.
        to_value:      Only count pairs entering this node.
        include_self:  Count pairs where ``from == to``.
        collect_pairs: Also keep an ``EventPair`` per counted transition.

    Returns:
        ``TransitionCounts`` for the constrained population.
    """
    result = TransitionCounts()
    for seq in sequences:
        part = _count_line(seq, from_value, to_value, include_self, collect_pairs)
        result.counts.update(part.counts)
        result.pairs.extend(part.pairs)
    return result


def _count_line(
    seq: LineSequence,
    from_value: Optional[str],
    to_value: Optional[str],
    include_self: bool,
    collect_pairs: bool,
) -> TransitionCounts:
    counts: Counter = Counter()
    pairs: List[EventPair] = []

    for prev, nxt in seq.adjacent():
        if from_value is not None and prev.node != from_value:
            continue
        if to_value is not None and nxt.node != to_value:
            continue
        if not include_self and prev.node == nxt.node:
            continue

        counts[(prev.node, nxt.node)] += 1
        if collect_pairs:
            pairs.append(_make_pair(seq.line_id, prev, nxt))

    return TransitionCounts(counts=counts, pairs=pairs)


def _make_pair(line_id: str, prev: SequenceStep, nxt: SequenceStep) -> EventPair:
    """Build an ``EventPair`` with the running time between the two stops."""
    running: Optional[float] = None
    if prev.end_time is not None and nxt.start_time is not None:
        minutes = (nxt.start_time - prev.end_time).total_seconds() / 60.0
        running = round(minutes, 1)
    return EventPair(
        line_id=line_id,
        from_node=prev.node,
        to_node=nxt.node,
        from_start=prev.start_time,
        to_start=nxt.start_time,
        running_minutes=running,
    )
