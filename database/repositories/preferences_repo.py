"""
Preferences repository for user preferences CRUD operations.
"""

from database.models import UserPreference

from .document_repo import UserDocumentRepository


class PreferencesRepository(UserDocumentRepository[UserPreference]):
    """Repository for UserPreference model operations."""

    model = UserPreference
