"""Liveness endpoint."""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


def _uptime_seconds() -> float:
    return time.monotonic() - _STARTED_AT


@router.get("/health")
async def health_check():
    """Report service health with a timestamp and process uptime."""
    try:
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(_uptime_seconds(), 3),
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "error": "Service unavailable"},
        )
