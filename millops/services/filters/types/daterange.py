"""
DateRangeFilter — Inclusive calendar-date bounds.

Reads two query parameters (``startDate`` / ``endDate`` by default),
either of which may be absent.  Bounds are ISO ``YYYY-MM-DD`` dates;
timestamps are rejected so callers cannot smuggle a time-of-day in.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from millops.services.filters.base import BaseFilter


class DateRangeFilter(BaseFilter):
    """Optional start/end date pair."""

    @property
    def start_param(self) -> str:
        return self.config.ui_config.get("start_param", "startDate")

    @property
    def end_param(self) -> str:
        return self.config.ui_config.get("end_param", "endDate")

    def extract(self, user_params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        raw = {}
        for key in (self.start_param, self.end_param):
            value = user_params.get(key)
            if isinstance(value, str):
                value = value.strip()
            if value not in (None, ""):
                raw[key] = value
        return raw or None

    def clean(self, raw: Dict[str, Any]) -> Dict[str, Optional[date]]:
        start = self._parse(raw.get(self.start_param), self.start_param)
        end = self._parse(raw.get(self.end_param), self.end_param)
        if start and end and start > end:
            self._fail(
                raw[self.start_param],
                f"{self.start_param} must not be after {self.end_param}",
                param=self.start_param,
            )
        return {"start_date": start, "end_date": end}

    def get_default(self) -> Dict[str, Optional[date]]:
        return {"start_date": None, "end_date": None}

    def assign(self, value: Dict[str, Optional[date]]) -> Dict[str, Any]:
        return dict(value)

    def _parse(self, raw: Any, param: str) -> Optional[date]:
        if raw is None:
            return None
        if isinstance(raw, date):
            return raw
        text = str(raw)
        try:
            if len(text) != 10:
                raise ValueError(text)
            return date.fromisoformat(text)
        except ValueError:
            self._fail(raw, f"{param} must be an ISO date (YYYY-MM-DD)", param=param)
