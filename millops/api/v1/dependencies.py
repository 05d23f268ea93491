"""
FastAPI dependencies — reusable ``Depends()`` callables.

Single Responsibility: decide which event store collaborator serves
a request.  Tests swap it out via ``app.dependency_overrides``.
"""

from __future__ import annotations

from millops.core.config import settings
from millops.services.data.event_fetcher import (
    DatabaseEventFetcher,
    DemoEventFetcher,
    EventFetcher,
)


def get_event_fetcher() -> EventFetcher:
    """Dependency: demo fetcher when ``DEMO_MODE`` is on, else the database."""
    if settings.DEMO_MODE:
        return DemoEventFetcher()
    return DatabaseEventFetcher()
