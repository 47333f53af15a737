"""
Saved searches repository.
"""

from database.models import UserSavedSearches

from .document_repo import UserDocumentRepository


class SavedSearchesRepository(UserDocumentRepository[UserSavedSearches]):
    """Repository for UserSavedSearches model operations."""

    model = UserSavedSearches
