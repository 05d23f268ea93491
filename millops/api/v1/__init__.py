"""
API v1 — Router aggregation.
"""

from fastapi import APIRouter

from millops.api.v1.system import router as system_router
from millops.api.v1.downtime import router as downtime_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(system_router)
api_router.include_router(downtime_router)
