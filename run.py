"""
MillOps Analytics — Application Runner.

Usage:
    python run.py          → API server (port from API_PORT, default 8000)
    python run.py demo     → API server on synthetic data (DEMO_MODE=true)
"""

import os
import sys

import uvicorn


def run_api() -> None:
    """Start the FastAPI analytics engine."""
    from millops.core.config import settings

    print(f"🚀 FastAPI → http://localhost:{settings.API_PORT}")
    if settings.DEBUG:
        print(f"📄 Docs    → http://localhost:{settings.API_PORT}/api/docs")
    uvicorn.run(
        "millops.main:app",
        host="0.0.0.0",
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


def run_demo() -> None:
    """Start the API serving synthetic events."""
    os.environ["DEMO_MODE"] = "true"
    run_api()


if __name__ == "__main__":
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "api"
    runners = {"api": run_api, "demo": run_demo}
    runner = runners.get(mode)
    if runner is None:
        print(f"Unknown mode '{mode}'. Use: api | demo")
        sys.exit(1)
    runner()
