"""
User repository: resolves usernames to internal user IDs.

Users are never created or removed by this service.
"""

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import UserNotFoundError
from database.models import User


class UserRepository:
    """Repository for User lookups."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def is_user(self, username: str) -> bool:
        """Check whether a user with this username exists."""
        result = await self.session.execute(select(exists().where(User.username == username)))
        return bool(result.scalar())

    async def user_id(self, username: str) -> UUID:
        """
        Get the internal ID for a username.

        Raises:
            UserNotFoundError: If no such user exists
        """
        result = await self.session.execute(select(User.id).where(User.username == username))
        user_id = result.scalar_one_or_none()
        if user_id is None:
            raise UserNotFoundError(username)
        return user_id
