"""Concrete filter types — auto-imported by the engine."""

from millops.services.filters.types.daterange import DateRangeFilter
from millops.services.filters.types.dropdown import DropdownFilter
from millops.services.filters.types.text import TextFilter
from millops.services.filters.types.number import NumberFilter
from millops.services.filters.types.toggle import ToggleFilter

__all__ = [
    "DateRangeFilter",
    "DropdownFilter",
    "TextFilter",
    "NumberFilter",
    "ToggleFilter",
]
