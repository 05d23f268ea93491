"""System endpoints — health check."""

from fastapi import APIRouter

from millops import __version__
from millops.core.config import settings

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": __version__,
        "env": settings.APP_ENV,
        "demo_mode": settings.DEMO_MODE,
    }
