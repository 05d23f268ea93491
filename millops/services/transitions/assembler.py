"""
ResultAssembler — Packages ranked transitions into the response.

Single Responsibility: compute percentages and summary statistics and
shape them into the JSON contract expected by the frontend.

Output schema::

    {
        "grouping": "reason" | "category" | "equipment",
        "totalTransitions": int,
        "distinctNodeCount": int,
        "transitions": [{"from", "to", "count", "percentage"}, ...],
        "other": {"count", "percentage"},          # only when truncated
        "matrix": {"rows", "cols", "data"},
        "eventPairs": [...],                         # only when requested
    }

Percentages are ``count / totalTransitions * 100`` rounded to one
decimal place, halves rounded up.  The payload carries no timestamps
or timings, so identical inputs serialize identically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from millops.services.transitions.aggregator import EventPair
from millops.services.transitions.grouping import GroupingDimension
from millops.services.transitions.matrix import TransitionMatrix
from millops.services.transitions.ranker import Transition

_ONE_DECIMAL = Decimal("0.1")


def percentage(count: int, total: int) -> float:
    """``count / total * 100`` rounded half-up to one decimal (0 when total is 0)."""
    if total <= 0:
        return 0.0
    value = (Decimal(count) * 100) / Decimal(total)
    return float(value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class TransitionRow:
    from_node: str
    to_node: str
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_node,
            "to": self.to_node,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass
class TransitionsResult:
    """Structured outcome of one transitions computation."""
    grouping: GroupingDimension
    total_transitions: int
    distinct_node_count: int
    transitions: List[TransitionRow] = field(default_factory=list)
    other: Optional[TransitionRow] = None
    matrix: TransitionMatrix = field(default_factory=TransitionMatrix)
    event_pairs: Optional[List[EventPair]] = None

    @property
    def rows(self) -> List[TransitionRow]:
        """Every emitted row, the "other" bucket last."""
        return self.transitions + ([self.other] if self.other else [])

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "grouping": self.grouping.value,
            "totalTransitions": self.total_transitions,
            "distinctNodeCount": self.distinct_node_count,
            "transitions": [t.to_dict() for t in self.transitions],
        }
        if self.other is not None:
            out["other"] = {
                "count": self.other.count,
                "percentage": self.other.percentage,
            }
        out["matrix"] = self.matrix.to_dict()
        if self.event_pairs is not None:
            out["eventPairs"] = [p.to_dict() for p in self.event_pairs]
        return out


class ResultAssembler:
    """Stateless helper that builds ``TransitionsResult`` values."""

    @staticmethod
    def assemble(
        grouping: GroupingDimension,
        kept: List[Transition],
        other: Optional[Transition],
        total: int,
        distinct_nodes: int,
        matrix: Optional[TransitionMatrix] = None,
        event_pairs: Optional[List[EventPair]] = None,
    ) -> TransitionsResult:
        if total == 0:
            return ResultAssembler.empty(grouping, event_pairs is not None)

        return TransitionsResult(
            grouping=grouping,
            total_transitions=total,
            distinct_node_count=distinct_nodes,
            transitions=[_row(t, total) for t in kept],
            other=_row(other, total) if other is not None else None,
            matrix=matrix or TransitionMatrix(),
            event_pairs=event_pairs,
        )

    @staticmethod
    def empty(
        grouping: GroupingDimension,
        with_pairs: bool = False,
    ) -> TransitionsResult:
        """Valid "no data" result — zero transitions is not an error."""
        return TransitionsResult(
            grouping=grouping,
            total_transitions=0,
            distinct_node_count=0,
            event_pairs=[] if with_pairs else None,
        )


def _row(t: Transition, total: int) -> TransitionRow:
    return TransitionRow(
        from_node=t.from_node,
        to_node=t.to_node,
        count=t.count,
        percentage=percentage(t.count, total),
    )
