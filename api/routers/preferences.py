"""
Preferences router.

Preferences are stored as the raw JSON document the client sent. Reads
return the document bare; writes echo it back wrapped under
``"preferences"``.

Endpoints:
- GET /preferences/ - Greeting
- GET /preferences/{username} - Get user preferences
- PUT|POST /preferences/{username} - Create or replace user preferences
- DELETE /preferences/{username} - Delete user preferences
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from api.dependencies import get_json_object, get_preferences_repository, require_user
from database.repositories import PreferencesRepository
from services.envelope import PREFERENCES_KEY, normalize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello from user-preferences.\n"


@router.get("/{username}")
async def get_preferences(
    username: str = Depends(require_user),
    prefs_repo: PreferencesRepository = Depends(get_preferences_repository),
) -> Any:
    """
    Get a user's preferences.

    Returns ``{}`` if none have been saved.
    """
    raw = await prefs_repo.get_payload(username)
    return normalize(raw, wrap=False, key=PREFERENCES_KEY)


@router.put("/{username}")
@router.post("/{username}")
async def update_preferences(
    request: Request,
    username: str = Depends(require_user),
    body: dict[str, Any] = Depends(get_json_object),
    prefs_repo: PreferencesRepository = Depends(get_preferences_repository),
) -> Any:
    """
    Create or replace a user's preferences.

    PUT and POST are interchangeable.
    """
    payload = (await request.body()).decode("utf-8")
    record = await prefs_repo.upsert(username, payload)
    logger.info(f"Saved preferences for {username}")
    return normalize(record.payload, wrap=True, key=PREFERENCES_KEY)


@router.delete("/{username}")
async def delete_preferences(
    username: str = Depends(require_user),
    prefs_repo: PreferencesRepository = Depends(get_preferences_repository),
) -> Response:
    """Delete a user's preferences. Succeeds even if there were none."""
    if await prefs_repo.delete(username):
        logger.info(f"Deleted preferences for {username}")
    return Response(status_code=200)
