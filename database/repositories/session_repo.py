"""
Session repository for saved UI session state.
"""

from database.models import UserSession

from .document_repo import UserDocumentRepository


class SessionRepository(UserDocumentRepository[UserSession]):
    """Repository for UserSession model operations."""

    model = UserSession
