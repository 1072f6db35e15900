"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from datetime import datetime, timezone
import logging
import platform

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from api.dependencies import get_redis_client


logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "orders-api",
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(client=Depends(get_redis_client)):
    """
    Readiness check endpoint.

    Pings Redis when orders are stored there; the in-memory store is
    always ready.
    """
    store = "memory"
    if client is not None:
        try:
            await client.ping()
            store = "ok"
        except RedisError as e:
            logger.warning(f"Readiness check failed: {e}")
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unavailable",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "checks": {"api": "ok", "redis": "unreachable"},
                },
            )

    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {"api": "ok", "redis": store},
    }
