"""
Repository layer for database access.

Provides async CRUD operations for all models.
"""

from .alert_repo import AlertRepository
from .bag_repo import BagRepository
from .document_repo import UserDocumentRepository
from .preferences_repo import PreferencesRepository
from .searches_repo import SavedSearchesRepository
from .session_repo import SessionRepository
from .user_repo import UserRepository

__all__ = [
    "UserRepository",
    "UserDocumentRepository",
    "PreferencesRepository",
    "SessionRepository",
    "SavedSearchesRepository",
    "BagRepository",
    "AlertRepository",
]
