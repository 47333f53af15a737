"""
Pydantic schemas for API request/response models.
"""

from .common import (
    HealthStatus,
    HealthCheckResponse,
    DetailedHealthCheckResponse,
    ComponentHealth,
)

from .bags import (
    AddBagResponse,
    BagListResponse,
    BagRecord,
)

from .alerts import (
    AlertListResponse,
    AlertRecord,
    CreateAlertRequest,
    DeleteAlertRequest,
)

__all__ = [
    # Common
    "HealthStatus",
    "HealthCheckResponse",
    "DetailedHealthCheckResponse",
    "ComponentHealth",
    # Bags
    "AddBagResponse",
    "BagListResponse",
    "BagRecord",
    # Alerts
    "AlertListResponse",
    "AlertRecord",
    "CreateAlertRequest",
    "DeleteAlertRequest",
]
