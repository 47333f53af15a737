"""
Shared repository for one-row-per-user text documents.
"""

from typing import ClassVar, Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User, UserPreference, UserSavedSearches, UserSession

from .user_repo import UserRepository

DocumentModel = TypeVar("DocumentModel", UserPreference, UserSession, UserSavedSearches)


class UserDocumentRepository(Generic[DocumentModel]):
    """
    CRUD for a table holding at most one raw JSON document per user.

    Subclasses set ``model``. Every operation is addressed by username; the
    internal user ID is resolved through UserRepository.
    """

    model: ClassVar[type]

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)

    def _by_username(self, username: str):
        return (
            select(self.model)
            .join(User, User.id == self.model.user_id)
            .where(User.username == username)
        )

    async def exists_for(self, username: str) -> bool:
        """Check whether the user already has a stored document."""
        query = select(
            exists()
            .where(self.model.user_id == User.id)
            .where(User.username == username)
        )
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def get(self, username: str) -> DocumentModel | None:
        """Get the user's document, if any."""
        result = await self.session.execute(self._by_username(username))
        return result.scalars().first()

    async def get_payload(self, username: str) -> str:
        """Get the raw stored payload, or an empty string if there is none."""
        record = await self.get(username)
        return record.payload if record else ""

    async def create(self, username: str, payload: str) -> DocumentModel:
        """Insert a new document for the user."""
        user_id = await self.users.user_id(username)
        record = self.model(user_id=user_id, payload=payload)
        self.session.add(record)
        await self.session.flush()
        return record

    async def update(self, username: str, payload: str) -> DocumentModel | None:
        """Overwrite the user's existing document."""
        record = await self.get(username)
        if not record:
            return None
        record.payload = payload
        await self.session.flush()
        return record

    async def upsert(self, username: str, payload: str) -> DocumentModel:
        """Insert the document if the user has none, otherwise update it."""
        record = await self.update(username, payload)
        if record:
            return record
        return await self.create(username, payload)

    async def delete(self, username: str) -> bool:
        """Delete the user's document. Returns whether one existed."""
        record = await self.get(username)
        if not record:
            return False
        await self.session.delete(record)
        await self.session.flush()
        return True
