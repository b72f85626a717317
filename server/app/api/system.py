"""
System and health check API routes.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import get_logger
from infrastructure import mongo_client

router = APIRouter(prefix="/api/system", tags=["system"])
logger = get_logger("api.system")

# Track server start time
START_TIME = time.time()


def format_uptime(seconds: int) -> str:
    """Format uptime seconds as '1d 2h 3m 4s'."""
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    if days:
        return f"{days}d {hours}h {minutes}m {seconds}s"
    if hours:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


@router.get("/health")
def health_check():
    """Health check endpoint."""
    uptime_seconds = int(time.time() - START_TIME)
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": uptime_seconds,
        "uptime": format_uptime(uptime_seconds),
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check():
    """Readiness check: the document store must answer a ping."""
    try:
        mongo_client.ping()
        return {"status": "ready", "checks": {"database": "ok"}, "timestamp": datetime.now(timezone.utc).isoformat()}
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "checks": {"database": f"error: {e}"}, "timestamp": datetime.now(timezone.utc).isoformat()},
        )
