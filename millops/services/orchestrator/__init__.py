"""
Orchestrator package — transitions request workflow.

Modules:
  pipeline — TransitionsOrchestrator coordinator

Usage::

    from millops.services.orchestrator import transitions_orchestrator

    result = await transitions_orchestrator.execute(user_params, fetcher)
"""

from millops.services.orchestrator.pipeline import (
    TransitionsOrchestrator,
    transitions_orchestrator,
)

__all__ = [
    "TransitionsOrchestrator",
    "transitions_orchestrator",
]
