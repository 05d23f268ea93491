"""
Domain errors for the analytics pipeline.

Every error carries a machine-readable ``kind`` plus the offending
``field`` / ``value`` so the HTTP layer can render an actionable body
without inspecting message text.

Mapping to status codes lives in ``millops.main`` — the core only
raises, it never decides on transport semantics.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TransitionsError(Exception):
    """Base class for all errors raised by the transitions pipeline."""

    kind: str = "TransitionsError"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"kind": self.kind, "message": self.message}
        if self.field is not None:
            out["field"] = self.field
        if self.value is not None:
            out["value"] = self.value
        return out


class InvalidParameter(TransitionsError):
    """A request parameter is malformed or out of range."""

    kind = "InvalidParameter"


class UpstreamFetchFailure(TransitionsError):
    """The event store could not return data."""

    kind = "UpstreamFetchFailure"
