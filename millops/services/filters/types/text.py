"""TextFilter — Free-text value (mill, factory, node values)."""

from __future__ import annotations

from typing import Any, Optional

from millops.services.filters.base import BaseFilter


class TextFilter(BaseFilter):
    """Free-text input with optional length constraints."""

    def clean(self, raw: Any) -> Optional[str]:
        value = str(raw).strip()
        ui = self.config.ui_config
        mn = ui.get("min_length", 1)
        mx = ui.get("max_length", 255)
        if not mn <= len(value) <= mx:
            self._fail(
                raw,
                f"{self.config.param_name} must be {mn}-{mx} characters long",
            )
        return value

    def get_default(self) -> Optional[str]:
        return self.config.default_value
