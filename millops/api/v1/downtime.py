"""
Downtime API endpoints — transition analysis.

Routes:
  GET /downtime/transitions          → transition-frequency model
  GET /downtime/transitions/params   → accepted query parameters

Query parameters are taken as raw strings and handed to the
FilterEngine; validation errors come back as ``InvalidParameter``
and are rendered by the exception handlers in ``millops.main``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from millops.api.v1.dependencies import EventFetcher, get_event_fetcher
from millops.services.filters.engine import filter_engine
from millops.services.orchestrator import transitions_orchestrator

router = APIRouter(prefix="/downtime", tags=["downtime"])


@router.get("/transitions")
async def get_downtime_transitions(
    fetcher: EventFetcher = Depends(get_event_fetcher),
    mill: Optional[str] = Query(None),
    factory: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    grouping: Optional[str] = Query(
        None, description="reason | category | equipment (default: reason)",
    ),
    top_n: Optional[str] = Query(None, alias="topN", description="Positive integer"),
    from_value: Optional[str] = Query(None, alias="fromValue"),
    to_value: Optional[str] = Query(None, alias="toValue"),
    include_self: Optional[str] = Query(None, alias="includeSelf"),
    include_pairs: Optional[str] = Query(None, alias="includePairs"),
) -> Dict[str, Any]:
    """
    Transition frequencies between consecutive downtime causes
    (or categories, or equipment) on the same production line.
    """
    user_params: Dict[str, Any] = {
        "mill": mill,
        "factory": factory,
        "startDate": start_date,
        "endDate": end_date,
        "grouping": grouping,
        "topN": top_n,
        "fromValue": from_value,
        "toValue": to_value,
        "includeSelf": include_self,
        "includePairs": include_pairs,
    }
    user_params = {k: v for k, v in user_params.items() if v is not None}

    result = await transitions_orchestrator.execute(user_params, fetcher)
    return result.to_dict()


@router.get("/transitions/params")
async def get_transitions_params():
    """Describe every query parameter accepted by ``/transitions``."""
    return {"params": filter_engine.describe()}
