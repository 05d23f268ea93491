"""
Relationship matrix — top-N "from" rows × top-N "to" columns.

Rows are the ``top_n`` source values with the largest summed outgoing
counts, columns the ``top_n`` targets with the largest summed incoming
counts (ties broken by label).  ``data[r][c]`` is the count of the
``(rows[r], cols[c])`` transition, 0 when never observed.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple


@dataclass
class TransitionMatrix:
    rows: List[str] = field(default_factory=list)
    cols: List[str] = field(default_factory=list)
    data: List[List[int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": self.rows, "cols": self.cols, "data": self.data}


def build_matrix(
    counts: Mapping[Tuple[str, str], int],
    top_n: int,
) -> TransitionMatrix:
    from_totals: Counter = Counter()
    to_totals: Counter = Counter()
    for (from_node, to_node), count in counts.items():
        from_totals[from_node] += count
        to_totals[to_node] += count

    rows = _top_labels(from_totals, top_n)
    cols = _top_labels(to_totals, top_n)

    data = [
        [int(counts.get((r, c), 0)) for c in cols]
        for r in rows
    ]
    return TransitionMatrix(rows=rows, cols=cols, data=data)


def _top_labels(totals: Counter, top_n: int) -> List[str]:
    ordered = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    return [label for label, _ in ordered[:top_n]]
