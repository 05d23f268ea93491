"""
GroupingDimension — which event attribute labels a transition node.

Closed enumeration.  ``column`` is the single place where a dimension
is mapped to a ``DowntimeEvent`` attribute; adding a dimension means
adding a member here and a branch there, nothing else.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import pandas as pd


class GroupingDimension(str, Enum):
    REASON = "reason"
    CATEGORY = "category"
    EQUIPMENT = "equipment"

    @property
    def column(self) -> str:
        """Event column holding this dimension's node values."""
        if self is GroupingDimension.REASON:
            return "cause"
        if self is GroupingDimension.CATEGORY:
            return "category"
        if self is GroupingDimension.EQUIPMENT:
            return "equipment"
        raise AssertionError(f"unhandled grouping dimension: {self!r}")

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def node_value(raw: Any) -> Optional[str]:
    """
    Normalise one cell to a node label.

    ``None``, NaN and blank strings have no node and return ``None``.
    """
    if raw is None:
        return None
    if not isinstance(raw, str) and pd.isna(raw):
        return None
    label = str(raw).strip()
    return label or None
