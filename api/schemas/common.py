"""
Common Pydantic schemas used across the API.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Dict

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """Health check status enum."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class ComponentHealth(BaseModel):
    """Health status of a single component."""

    status: HealthStatus
    latency_ms: Optional[float] = None
    error: Optional[str] = None


class HealthCheckResponse(BaseModel):
    """Basic health check response."""

    status: HealthStatus
    timestamp: datetime = Field(default_factory=lambda: datetime.now())


class DetailedHealthCheckResponse(BaseModel):
    """Health check response with the status of each dependency."""

    status: HealthStatus
    timestamp: datetime = Field(default_factory=lambda: datetime.now())
    version: str
    environment: str
    uptime_seconds: float
    components: Dict[str, ComponentHealth] = Field(
        default_factory=dict,
        description="Health status of each component"
    )
