"""ToggleFilter — Boolean on/off switch from a query string."""

from __future__ import annotations

from typing import Any

from millops.services.filters.base import BaseFilter

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class ToggleFilter(BaseFilter):
    """Simple boolean toggle."""

    def clean(self, raw: Any) -> bool:
        if isinstance(raw, bool):
            return raw
        token = str(raw).strip().lower()
        if token in _TRUE:
            return True
        if token in _FALSE:
            return False
        self._fail(raw, f"{self.config.param_name} must be true or false")

    def get_default(self) -> bool:
        return bool(self.config.default_value) if self.config.default_value is not None else False
