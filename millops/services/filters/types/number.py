"""NumberFilter — Integer input with min/max bounds."""

from __future__ import annotations

from typing import Any

from millops.services.filters.base import BaseFilter


class NumberFilter(BaseFilter):
    """
    Integer filter with validation bounds.

    Non-numeric or out-of-range input is rejected rather than replaced
    by the default, so a client bug surfaces as a 400.
    """

    def clean(self, raw: Any) -> int:
        if isinstance(raw, bool):
            self._fail(raw, f"{self.config.param_name} must be an integer")
        try:
            value = int(str(raw).strip())
        except (ValueError, TypeError):
            self._fail(raw, f"{self.config.param_name} must be an integer")
        ui = self.config.ui_config
        lo = ui.get("min")
        hi = ui.get("max")
        if lo is not None and value < lo:
            self._fail(raw, f"{self.config.param_name} must be >= {lo}")
        if hi is not None and value > hi:
            self._fail(raw, f"{self.config.param_name} must be <= {hi}")
        return value

    def get_default(self) -> int:
        return self.config.default_value if self.config.default_value is not None else 0
