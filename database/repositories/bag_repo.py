"""
Bag repository for bag and default-bag CRUD operations.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from database.models import Bag, DefaultBag, User

from .user_repo import UserRepository

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BagRepository:
    """Repository for Bag and DefaultBag model operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)

    # ============ Bags ============

    async def has_bags(self, username: str) -> bool:
        """Check whether the user owns at least one bag."""
        query = select(
            exists().where(Bag.user_id == User.id).where(User.username == username)
        )
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def has_bag(self, username: str, bag_id: UUID) -> bool:
        """Check whether the bag exists and belongs to the user."""
        query = select(
            exists()
            .where(Bag.user_id == User.id)
            .where(User.username == username)
            .where(Bag.id == bag_id)
        )
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def list_by_username(self, username: str) -> list[Bag]:
        """List all bags for a user."""
        result = await self.session.execute(
            select(Bag).join(User, User.id == Bag.user_id).where(User.username == username)
        )
        return list(result.scalars().all())

    async def get(self, username: str, bag_id: UUID) -> Bag | None:
        """Get a single bag owned by the user."""
        result = await self.session.execute(
            select(Bag)
            .join(User, User.id == Bag.user_id)
            .where(User.username == username)
            .where(Bag.id == bag_id)
        )
        return result.scalar_one_or_none()

    async def add(self, username: str, contents: dict[str, Any]) -> Bag:
        """Create a new bag for the user. Never updates an existing one."""
        user_id = await self.users.user_id(username)
        bag = Bag(user_id=user_id, contents=contents)
        self.session.add(bag)
        await self.session.flush()
        return bag

    async def update(self, username: str, bag_id: UUID, contents: dict[str, Any]) -> Bag | None:
        """
        Replace a bag's contents.

        Does nothing and returns None if the bag does not belong to the user.
        """
        bag = await self.get(username, bag_id)
        if not bag:
            return None
        bag.contents = contents
        await self.session.flush()
        return bag

    async def delete(self, username: str, bag_id: UUID) -> bool:
        """
        Delete one bag. Returns whether a row was removed.

        A default designation pointing at the bag is removed with it.
        """
        user_id = await self.users.user_id(username)
        await self._clear_default_pointing_at(user_id, bag_id)
        result = await self.session.execute(
            delete(Bag).where(Bag.id == bag_id, Bag.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all(self, username: str) -> int:
        """Delete every bag the user owns, along with the default designation."""
        user_id = await self.users.user_id(username)
        await self.session.execute(delete(DefaultBag).where(DefaultBag.user_id == user_id))
        result = await self.session.execute(delete(Bag).where(Bag.user_id == user_id))
        await self.session.flush()
        return result.rowcount

    # ============ Default bag ============

    async def has_default(self, username: str) -> bool:
        """Check whether a default-bag mapping exists for the user."""
        query = select(
            exists().where(DefaultBag.user_id == User.id).where(User.username == username)
        )
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def get_default(self, username: str) -> Bag | None:
        """
        Get the bag the user's default mapping points at.

        A mapping whose bag no longer exists yields None.
        """
        result = await self.session.execute(
            select(Bag)
            .join(DefaultBag, DefaultBag.bag_id == Bag.id)
            .join(User, User.id == DefaultBag.user_id)
            .where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def set_default(self, username: str, bag_id: UUID) -> None:
        """Point the user's default mapping at ``bag_id``, replacing any existing one."""
        user_id = await self.users.user_id(username)
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise StoreError(message=f"Default bag upsert is not supported on {dialect}")

        stmt = insert(DefaultBag).values(user_id=user_id, bag_id=bag_id)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={"bag_id": stmt.excluded.bag_id},
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def _clear_default_pointing_at(self, user_id: UUID, bag_id: UUID) -> None:
        await self.session.execute(
            delete(DefaultBag).where(DefaultBag.user_id == user_id, DefaultBag.bag_id == bag_id)
        )
