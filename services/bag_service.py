"""
Bag service: default-bag management on top of BagRepository.

Every user has a default bag reachable on demand. It is created empty the
first time it is asked for, so clients never provision it explicitly.
"""

import logging
from typing import Any

from database.models import Bag
from database.repositories.bag_repo import BagRepository

logger = logging.getLogger(__name__)


class BagService:
    """Resolves, updates and deletes a user's default bag."""

    def __init__(self, bag_repo: BagRepository):
        self.bag_repo = bag_repo

    async def get_default_bag(self, username: str) -> Bag:
        """
        Get the user's default bag, creating it if needed.

        A mapping that points at a bag which no longer exists counts as no
        default. Creation adds an empty bag and records it as the default in
        the caller's transaction, so a failure in either step rolls back both.

        Concurrent first calls for the same user may each add a bag. The
        mapping upsert leaves exactly one of them as the default; the other
        stays in the user's bag list.
        """
        bag = await self.bag_repo.get_default(username)
        if bag is not None:
            return bag
        return await self._create_default_bag(username)

    async def _create_default_bag(self, username: str) -> Bag:
        bag = await self.bag_repo.add(username, {})
        await self.bag_repo.set_default(username, bag.id)
        logger.info(f"Created default bag {bag.id} for {username}")
        return bag

    async def update_default_bag(self, username: str, contents: dict[str, Any]) -> Bag:
        """Replace the default bag's contents and return the updated bag."""
        bag = await self.get_default_bag(username)
        updated = await self.bag_repo.update(username, bag.id, contents)
        return updated or bag

    async def delete_default_bag(self, username: str) -> None:
        """
        Delete the default bag and its designation.

        The next get_default_bag call creates a fresh, empty default.
        """
        bag = await self.get_default_bag(username)
        await self.bag_repo.delete(username, bag.id)
        logger.info(f"Deleted default bag {bag.id} for {username}")
