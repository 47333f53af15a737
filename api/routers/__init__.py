"""
API routers for different endpoints.
"""

from .health import router as health_router
from .preferences import router as preferences_router
from .sessions import router as sessions_router
from .searches import router as searches_router
from .bags import router as bags_router
from .alerts import router as alerts_router

__all__ = [
    "health_router",
    "preferences_router",
    "sessions_router",
    "searches_router",
    "bags_router",
    "alerts_router",
]
