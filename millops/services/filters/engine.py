"""
FilterEngine — Registry-driven request validation (the Filter Resolver).

It:

1. Reads ``FILTER_REGISTRY`` entries.
2. Builds a ``FilterConfig`` for each.
3. Dynamically imports the concrete filter class from
   ``millops.services.filters.types``.
4. Runs every filter against the raw query params and builds a
   ``TransitionsFilters``.

Pure transformation: no I/O, no cache, no side effects.  The first
invalid parameter (in ``display_order``) raises ``InvalidParameter``.

Usage::

    from millops.services.filters.engine import filter_engine

    filters = filter_engine.resolve({"grouping": "category", "topN": "5"})
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from millops.config.filter_registry import FILTER_REGISTRY
from millops.services.filters.base import BaseFilter, FilterConfig, TransitionsFilters

logger = logging.getLogger(__name__)


# ── Type map: filter_type → module name holding the class ──
_TYPE_TO_MODULE: dict[str, str] = {
    "daterange": "daterange",
    "dropdown":  "dropdown",
    "text":      "text",
    "number":    "number",
    "toggle":    "toggle",
}

# ── Class name per filter_type (the concrete Python class) ──
_TYPE_TO_CLASS: dict[str, str] = {
    "daterange": "DateRangeFilter",
    "dropdown":  "DropdownFilter",
    "text":      "TextFilter",
    "number":    "NumberFilter",
    "toggle":    "ToggleFilter",
}


def _get_filter_class(filter_type: str) -> Optional[Type[BaseFilter]]:
    """Dynamically import and return the concrete filter class."""
    mod_name = _TYPE_TO_MODULE.get(filter_type)
    cls_name = _TYPE_TO_CLASS.get(filter_type)
    if not mod_name or not cls_name:
        return None
    module = importlib.import_module(f"millops.services.filters.types.{mod_name}")
    return getattr(module, cls_name, None)


class FilterEngine:
    """
    Central filter orchestrator.

    Builds filter instances from the registry.  Adding a new
    parameter only requires a registry entry (and a class file when
    the type is new).
    """

    def __init__(self, registry: Optional[Dict[str, dict]] = None) -> None:
        self._registry = registry if registry is not None else FILTER_REGISTRY
        self._instances: Optional[List[BaseFilter]] = None

    # ── Build instances ──────────────────────────────────────

    def get_all(self) -> List[BaseFilter]:
        """Instantiate every registered filter, sorted by ``display_order``."""
        if self._instances is not None:
            return self._instances

        instances: List[BaseFilter] = []
        for class_name, entry in sorted(
            self._registry.items(), key=lambda kv: kv[1].get("display_order", 99)
        ):
            config = FilterConfig(
                class_name=class_name,
                filter_type=entry["filter_type"],
                param_name=entry["param_name"],
                target=entry["target"],
                display_order=entry.get("display_order", 0),
                description=entry.get("description", ""),
                default_value=entry.get("default_value"),
                required=entry.get("required", False),
                ui_config=entry.get("ui_config", {}),
            )

            cls = _get_filter_class(config.filter_type)
            if cls is None:
                logger.warning(
                    f"[FilterEngine] No class for type '{config.filter_type}' "
                    f"({class_name}) — skipped"
                )
                continue

            instances.append(cls(config))

        self._instances = instances
        return instances

    def get_by_param(self, param_name: str) -> Optional[BaseFilter]:
        """Find one filter by its HTTP parameter name."""
        for f in self.get_all():
            if f.config.param_name == param_name:
                return f
        return None

    def describe(self) -> List[Dict[str, Any]]:
        """JSON-serializable description of every accepted parameter."""
        out = []
        for f in self.get_all():
            item = f.to_dict()
            item["ui_config"] = {
                k: v for k, v in item["ui_config"].items() if k != "enum"
            }
            default = item["default_value"]
            if hasattr(default, "value"):
                item["default_value"] = default.value
            out.append(item)
        return out

    # ── Resolution ───────────────────────────────────────────

    def resolve(self, user_params: Mapping[str, Any]) -> TransitionsFilters:
        """
        Validate raw query params and build ``TransitionsFilters``.

        Raises:
            InvalidParameter: naming the first offending parameter.
        """
        params = dict(user_params)
        fields: Dict[str, Any] = {}

        for flt in self.get_all():
            fields.update(flt.resolve(params))

        return TransitionsFilters(**fields)


# ── Singleton ────────────────────────────────────────────────
filter_engine = FilterEngine()


def resolve_filters(user_params: Mapping[str, Any]) -> TransitionsFilters:
    """Module-level shortcut for ``filter_engine.resolve``."""
    return filter_engine.resolve(user_params)
