"""
SQLAlchemy models for the user-info service.
"""

from .alert import GlobalAlert
from .bag import Bag, DefaultBag
from .base import Base, JSONType
from .preferences import UserPreference, UserSavedSearches, UserSession
from .user import User

__all__ = [
    # Base
    "Base",
    "JSONType",
    # Models
    "User",
    "UserPreference",
    "UserSession",
    "UserSavedSearches",
    "Bag",
    "DefaultBag",
    "GlobalAlert",
]
