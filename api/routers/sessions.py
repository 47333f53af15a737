"""
Sessions router.

Same contract as preferences, with session documents wrapped under
``"session"``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from api.dependencies import get_json_object, get_session_repository, require_user
from database.repositories import SessionRepository
from services.envelope import SESSION_KEY, normalize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello from user-sessions.\n"


@router.get("/{username}")
async def get_user_session(
    username: str = Depends(require_user),
    session_repo: SessionRepository = Depends(get_session_repository),
) -> Any:
    raw = await session_repo.get_payload(username)
    return normalize(raw, wrap=False, key=SESSION_KEY)


@router.put("/{username}")
@router.post("/{username}")
async def update_user_session(
    request: Request,
    username: str = Depends(require_user),
    body: dict[str, Any] = Depends(get_json_object),
    session_repo: SessionRepository = Depends(get_session_repository),
) -> Any:
    payload = (await request.body()).decode("utf-8")
    record = await session_repo.upsert(username, payload)
    logger.info(f"Saved session for {username}")
    return normalize(record.payload, wrap=True, key=SESSION_KEY)


@router.delete("/{username}")
async def delete_user_session(
    username: str = Depends(require_user),
    session_repo: SessionRepository = Depends(get_session_repository),
) -> Response:
    if await session_repo.delete(username):
        logger.info(f"Deleted session for {username}")
    return Response(status_code=200)
