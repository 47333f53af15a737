"""
FastAPI dependency injection for database sessions and repositories.
"""

import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from core.exceptions import BadRequestError, StoreError, UserNotFoundError
from core.usernames import add_username_suffix
from database import get_session, is_database_available
from database.repositories import (
    AlertRepository,
    BagRepository,
    PreferencesRepository,
    SavedSearchesRepository,
    SessionRepository,
    UserRepository,
)
from services.bag_service import BagService

logger = logging.getLogger(__name__)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Raises StoreError if the database is not configured/available.
    """
    if not is_database_available():
        raise StoreError(message="Database not configured")

    async for session in get_session():
        yield session


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    """Get UserRepository dependency."""
    return UserRepository(session)


async def get_preferences_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PreferencesRepository:
    """Get PreferencesRepository dependency."""
    return PreferencesRepository(session)


async def get_session_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SessionRepository:
    """Get SessionRepository dependency."""
    return SessionRepository(session)


async def get_searches_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SavedSearchesRepository:
    """Get SavedSearchesRepository dependency."""
    return SavedSearchesRepository(session)


async def get_bag_repository(
    session: AsyncSession = Depends(get_db_session),
) -> BagRepository:
    """Get BagRepository dependency."""
    return BagRepository(session)


async def get_bag_service(
    bag_repo: BagRepository = Depends(get_bag_repository),
) -> BagService:
    """Get BagService dependency."""
    return BagService(bag_repo)


async def get_alert_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AlertRepository:
    """Get AlertRepository dependency."""
    return AlertRepository(session)


async def require_user(
    username: str,
    user_repo: UserRepository = Depends(get_user_repository),
) -> str:
    """
    Resolve the ``{username}`` path parameter to an existing user.

    Raises UserNotFoundError (404) if the user does not exist.
    """
    if not await user_repo.is_user(username):
        raise UserNotFoundError(username)
    return username


async def require_domain_user(
    username: str,
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Like require_user, but qualifies the username with the configured domain first.
    """
    qualified = add_username_suffix(username, settings.user_domain)
    if not await user_repo.is_user(qualified):
        raise UserNotFoundError(qualified)
    return qualified


async def get_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Raises BadRequestError (400) if the body is empty or not valid JSON.
    """
    raw = await request.body()
    try:
        return json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise BadRequestError(message=f"Error parsing request body: {e}") from e


async def get_json_object(body: Any = Depends(get_json_body)) -> dict[str, Any]:
    """Like get_json_body, but the document must be a JSON object."""
    if not isinstance(body, dict):
        raise BadRequestError(message="Request body must be a JSON object")
    return body
