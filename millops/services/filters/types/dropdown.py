"""
DropdownFilter — Single value from a closed list of static options.

Options come from ``ui_config["static_options"]``; when the registry
names an ``enum`` the cleaned value is converted to that enum member.
"""

from __future__ import annotations

from typing import Any, List

from millops.services.filters.base import BaseFilter


class DropdownFilter(BaseFilter):
    """Single-select dropdown fed from a static option list."""

    def get_options(self) -> List[str]:
        return [str(o) for o in self.config.ui_config.get("static_options", [])]

    def clean(self, raw: Any) -> Any:
        value = str(raw).strip().lower()
        options = self.get_options()
        if value not in options:
            self._fail(
                raw,
                f"{self.config.param_name} must be one of: {', '.join(options)}",
            )
        return self._coerce(value)

    def get_default(self) -> Any:
        default = self.config.default_value
        return self._coerce(default) if default is not None else None

    def _coerce(self, value: str) -> Any:
        enum_cls = self.config.ui_config.get("enum")
        return enum_cls(value) if enum_cls is not None else value
