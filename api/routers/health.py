"""
Health check endpoints.

Provides basic, detailed, liveness and readiness checks.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError

from api.schemas.common import (
    HealthStatus,
    HealthCheckResponse,
    DetailedHealthCheckResponse,
    ComponentHealth,
)
from core.config import get_settings, Settings
from database import ping_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])

# Track application start time for uptime calculation
_start_time = time.time()


async def _check_database() -> ComponentHealth:
    start = time.perf_counter()
    try:
        reachable = await ping_database()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Database health check failed: {e}")
        return ComponentHealth(status=HealthStatus.UNHEALTHY, error=str(e))

    if not reachable:
        return ComponentHealth(
            status=HealthStatus.UNHEALTHY,
            error="Database not initialized",
        )
    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        latency_ms=round((time.perf_counter() - start) * 1000, 2),
    )


@router.get(
    "",
    response_model=HealthCheckResponse,
    summary="Basic health check",
    description="Quick health check endpoint for load balancers and container orchestration.",
)
async def health_check() -> HealthCheckResponse:
    """
    Basic health check.

    Returns a simple healthy status if the API is running.
    """
    return HealthCheckResponse(
        status=HealthStatus.HEALTHY,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/detailed",
    response_model=DetailedHealthCheckResponse,
    summary="Detailed health check",
    description="Health check with the status of the database.",
)
async def detailed_health_check(
    settings: Settings = Depends(get_settings),
) -> DetailedHealthCheckResponse:
    database = await _check_database()

    return DetailedHealthCheckResponse(
        status=database.status,
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        environment=settings.environment,
        uptime_seconds=round(time.time() - _start_time, 2),
        components={"database": database},
    )


@router.get(
    "/ready",
    response_model=HealthCheckResponse,
    summary="Readiness check",
    description="Check if the application is ready to accept traffic.",
    responses={503: {"model": HealthCheckResponse}},
)
async def readiness_check(response: Response) -> HealthCheckResponse:
    """
    Readiness check for Kubernetes.

    Ready once the database answers a trivial query. Responds 503 otherwise.
    """
    database = await _check_database()

    if database.status != HealthStatus.HEALTHY:
        response.status_code = 503

    return HealthCheckResponse(
        status=database.status,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/live",
    response_model=HealthCheckResponse,
    summary="Liveness check",
    description="Check if the application is alive.",
)
async def liveness_check() -> HealthCheckResponse:
    """
    Liveness check for Kubernetes.

    Simple check that the application process is running.
    """
    return HealthCheckResponse(
        status=HealthStatus.HEALTHY,
        timestamp=datetime.now(timezone.utc),
    )
