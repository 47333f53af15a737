"""
Saved searches router.

Saved searches are stored and returned exactly as sent; there is no
envelope. The body only has to be valid JSON.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from api.dependencies import get_json_body, get_searches_repository, require_user
from database.repositories import SavedSearchesRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/searches", tags=["searches"])


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello from saved-searches.\n"


@router.get("/{username}")
async def get_saved_searches(
    username: str = Depends(require_user),
    searches_repo: SavedSearchesRepository = Depends(get_searches_repository),
) -> Response:
    """Return the stored document verbatim, or ``{}`` if there is none."""
    raw = await searches_repo.get_payload(username)
    return Response(content=raw or "{}", media_type="application/json")


@router.put("/{username}")
@router.post("/{username}")
async def update_saved_searches(
    request: Request,
    username: str = Depends(require_user),
    body: Any = Depends(get_json_body),
    searches_repo: SavedSearchesRepository = Depends(get_searches_repository),
) -> dict[str, Any]:
    payload = (await request.body()).decode("utf-8")
    await searches_repo.upsert(username, payload)
    logger.info(f"Saved searches for {username}")
    return {"saved_searches": body}


@router.delete("/{username}")
async def delete_saved_searches(
    username: str = Depends(require_user),
    searches_repo: SavedSearchesRepository = Depends(get_searches_repository),
) -> Response:
    if await searches_repo.delete(username):
        logger.info(f"Deleted saved searches for {username}")
    return Response(status_code=200)
