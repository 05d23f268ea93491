"""
Ranker / truncator — stable top-N selection.

Ordering: count descending, then ``(from, to)`` ascending.  The
tie-break makes repeated calls on identical data return identical
output.

Everything past ``top_n`` is folded into a single synthetic
``Transition(OTHER, OTHER, sum_of_excluded)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

OTHER = "other"


@dataclass(frozen=True)
class Transition:
    """An ordered pair of node values with its aggregate count."""
    from_node: str
    to_node: str
    count: int

    @property
    def is_other(self) -> bool:
        return self.from_node == OTHER and self.to_node == OTHER

    def sort_key(self) -> Tuple[int, str, str]:
        return (-self.count, self.from_node, self.to_node)


def rank_transitions(counts: Mapping[Tuple[str, str], int]) -> List[Transition]:
    """All transitions in deterministic rank order."""
    ranked = [
        Transition(from_node=f, to_node=t, count=int(c))
        for (f, t), c in counts.items()
        if c > 0
    ]
    ranked.sort(key=Transition.sort_key)
    return ranked


def truncate(
    ranked: List[Transition],
    top_n: int,
) -> Tuple[List[Transition], Optional[Transition]]:
    """
    Keep the first ``top_n`` transitions.

    Returns:
        ``(kept, other)`` — ``other`` is ``None`` when nothing was cut.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")

    kept = ranked[:top_n]
    excluded = ranked[top_n:]
    if not excluded:
        return kept, None

    other = Transition(
        from_node=OTHER,
        to_node=OTHER,
        count=sum(t.count for t in excluded),
    )
    return kept, other
