"""
Services module for the user-info service.
"""
from .alert_window import active_clause, is_active
from .bag_service import BagService
from .envelope import PREFERENCES_KEY, SESSION_KEY, normalize

__all__ = [
    "BagService",
    "normalize",
    "PREFERENCES_KEY",
    "SESSION_KEY",
    "is_active",
    "active_clause",
]
