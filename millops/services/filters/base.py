"""
Base filter classes and dataclasses.

Defines the contract every request filter must follow:
  - ``FilterConfig``: registry entry for one filter instance.
  - ``BaseFilter``: abstract base with extract / clean / get_default.
  - ``TransitionsFilters``: the validated, strongly-typed request that
    every later pipeline stage consumes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

from millops.core.errors import InvalidParameter
from millops.services.transitions.grouping import GroupingDimension


# ─────────────────────────────────────────────────────────────
#  DATA CLASSES
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TransitionsFilters:
    """
    Validated request for the transitions pipeline.

    Built only by ``FilterEngine.resolve`` — never from raw strings.
    """
    mill: Optional[str] = None
    factory: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    grouping: GroupingDimension = GroupingDimension.REASON
    top_n: int = 12
    from_value: Optional[str] = None
    to_value: Optional[str] = None
    include_self: bool = True
    include_pairs: bool = False

    def __post_init__(self) -> None:
        if self.top_n < 1:
            raise InvalidParameter(
                "topN must be a positive integer", field="topN", value=self.top_n,
            )
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise InvalidParameter(
                "startDate must not be after endDate",
                field="startDate",
                value=self.start_date.isoformat(),
            )

    @property
    def fetch_params(self) -> Dict[str, Any]:
        """Subset of filters the event store understands."""
        return {
            "mill": self.mill,
            "factory": self.factory,
            "start_date": self.start_date,
            "end_date": self.end_date,
        }


@dataclass
class FilterConfig:
    """
    Configuration for one filter instance.

    Built from the matching entry in ``FILTER_REGISTRY`` (keyed by
    class_name).
    """
    class_name: str          # e.g. "GroupingFilter"
    filter_type: str         # "daterange" | "dropdown" | "text" | "number" | "toggle"
    param_name: str          # HTTP query parameter ("topN", "grouping", …)
    target: str              # attribute on TransitionsFilters
    display_order: int = 0
    description: str = ""
    default_value: Any = None
    required: bool = False
    ui_config: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "filter_type": self.filter_type,
            "param_name": self.param_name,
            "target": self.target,
            "display_order": self.display_order,
            "description": self.description,
            "default_value": self.default_value,
            "required": self.required,
            "ui_config": self.ui_config,
        }


# ─────────────────────────────────────────────────────────────
#  ABSTRACT BASE
# ─────────────────────────────────────────────────────────────

class BaseFilter(ABC):
    """
    Abstract base for every filter type.

    Subclasses **must** implement:
      - ``clean(raw)``    → Any  (raises ``InvalidParameter``)
      - ``get_default()`` → Any

    May override:
      - ``extract(user_params)`` → raw value(s) for this filter
      - ``assign(value)``        → ``{target: value}`` mapping
    """

    def __init__(self, config: FilterConfig) -> None:
        self.config = config

    @abstractmethod
    def clean(self, raw: Any) -> Any:
        """Return the typed value for *raw*, or raise ``InvalidParameter``."""

    @abstractmethod
    def get_default(self) -> Any:
        """Return the default value to use when none is provided."""

    def extract(self, user_params: Dict[str, Any]) -> Any:
        """Pull this filter's raw input out of the request params."""
        raw = user_params.get(self.config.param_name)
        if isinstance(raw, str):
            raw = raw.strip()
        if raw is None or raw == "":
            return None
        return raw

    def assign(self, value: Any) -> Dict[str, Any]:
        """Map the cleaned value onto ``TransitionsFilters`` fields."""
        return {self.config.target: value}

    def resolve(self, user_params: Dict[str, Any]) -> Dict[str, Any]:
        """extract → default → clean → assign."""
        raw = self.extract(user_params)
        if raw is None:
            if self.config.required:
                self._fail(raw, f"{self.config.param_name} is required")
            return self.assign(self.get_default())
        return self.assign(self.clean(raw))

    def _fail(self, value: Any, message: str, param: Optional[str] = None) -> None:
        raise InvalidParameter(
            message, field=param or self.config.param_name, value=value,
        )

    def to_dict(self) -> Dict[str, Any]:
        out = self.config.to_dict()
        out["default_value"] = self.get_default()
        return out
