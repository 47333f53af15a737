"""
Bags router.

A bag is an arbitrary JSON object stored for a user; a user may own any
number of them. One of them is the user's default bag, which is created
empty the first time it is requested.

Usernames are qualified with the configured user domain before lookup.

Endpoints:
- GET /bags/ - Greeting
- HEAD /bags/{username} - 200 if the user has any bags, 404 otherwise
- GET /bags/{username} - List bags
- PUT /bags/{username} - Add a bag
- DELETE /bags/{username} - Delete all bags
- GET|POST|DELETE /bags/{username}/default - Default bag
- GET|POST|DELETE /bags/{username}/{bag_id} - A single bag
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from api.dependencies import (
    get_bag_repository,
    get_bag_service,
    get_json_object,
    require_domain_user,
)
from api.schemas.bags import AddBagResponse, BagListResponse, BagRecord
from core.exceptions import BadRequestError, BagNotFoundError
from database.repositories import BagRepository
from services.bag_service import BagService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bags", tags=["bags"])


# ============ Helpers ============


def _parse_bag_id(bag_id: str) -> UUID:
    try:
        return UUID(bag_id)
    except ValueError as e:
        raise BadRequestError(message=f"invalid bag ID {bag_id}") from e


# ============ Collection ============


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello from the bags handler"


@router.head("/{username}")
async def has_bags(
    username: str = Depends(require_domain_user),
    bag_repo: BagRepository = Depends(get_bag_repository),
) -> Response:
    """Report whether the user owns at least one bag."""
    found = await bag_repo.has_bags(username)
    return Response(status_code=200 if found else 404)


@router.get("/{username}", response_model=BagListResponse)
async def list_bags(
    username: str = Depends(require_domain_user),
    bag_repo: BagRepository = Depends(get_bag_repository),
):
    bags = await bag_repo.list_by_username(username)
    return BagListResponse(bags=[BagRecord.model_validate(bag) for bag in bags])


@router.put("/{username}", response_model=AddBagResponse)
async def add_bag(
    username: str = Depends(require_domain_user),
    contents: dict[str, Any] = Depends(get_json_object),
    bag_repo: BagRepository = Depends(get_bag_repository),
):
    """Add a new bag. The request body becomes its contents."""
    bag = await bag_repo.add(username, contents)
    logger.info(f"Added bag {bag.id} for {username}")
    return AddBagResponse(id=bag.id)


@router.delete("/{username}")
async def delete_all_bags(
    username: str = Depends(require_domain_user),
    bag_repo: BagRepository = Depends(get_bag_repository),
) -> Response:
    """Delete every bag the user owns, including the default."""
    count = await bag_repo.delete_all(username)
    logger.info(f"Deleted {count} bags for {username}")
    return Response(status_code=200)


# ============ Default bag ============
# Registered before the /{bag_id} routes so "default" is never parsed as an ID.


@router.get("/{username}/default", response_model=BagRecord)
async def get_default_bag(
    username: str = Depends(require_domain_user),
    bag_service: BagService = Depends(get_bag_service),
):
    """Get the user's default bag, creating an empty one if needed."""
    bag = await bag_service.get_default_bag(username)
    return BagRecord.model_validate(bag)


@router.post("/{username}/default", response_model=BagRecord)
async def update_default_bag(
    username: str = Depends(require_domain_user),
    contents: dict[str, Any] = Depends(get_json_object),
    bag_service: BagService = Depends(get_bag_service),
):
    """Replace the default bag's contents and return the updated bag."""
    bag = await bag_service.update_default_bag(username, contents)
    logger.info(f"Updated default bag {bag.id} for {username}")
    return BagRecord.model_validate(bag)


@router.delete("/{username}/default", response_model=BagRecord)
async def delete_default_bag(
    username: str = Depends(require_domain_user),
    bag_service: BagService = Depends(get_bag_service),
):
    """
    Delete the default bag.

    Returns the empty default bag that replaces it.
    """
    await bag_service.delete_default_bag(username)
    bag = await bag_service.get_default_bag(username)
    return BagRecord.model_validate(bag)


# ============ Single bag ============


@router.get("/{username}/{bag_id}", response_model=BagRecord)
async def get_bag(
    bag_id: str,
    username: str = Depends(require_domain_user),
    bag_repo: BagRepository = Depends(get_bag_repository),
):
    parsed_id = _parse_bag_id(bag_id)
    bag = await bag_repo.get(username, parsed_id)
    if not bag:
        raise BagNotFoundError(message=f"bag {bag_id} not found for user {username}")
    return BagRecord.model_validate(bag)


@router.post("/{username}/{bag_id}")
async def update_bag(
    bag_id: str,
    username: str = Depends(require_domain_user),
    contents: dict[str, Any] = Depends(get_json_object),
    bag_repo: BagRepository = Depends(get_bag_repository),
) -> Response:
    """Replace a bag's contents. 404 if the user has no such bag."""
    parsed_id = _parse_bag_id(bag_id)
    if not await bag_repo.update(username, parsed_id, contents):
        raise BagNotFoundError(message=f"bag {bag_id} not found for user {username}")
    logger.info(f"Updated bag {bag_id} for {username}")
    return Response(status_code=200)


@router.delete("/{username}/{bag_id}")
async def delete_bag(
    bag_id: str,
    username: str = Depends(require_domain_user),
    bag_repo: BagRepository = Depends(get_bag_repository),
) -> Response:
    """Delete one bag. Succeeds even if the bag does not exist."""
    parsed_id = _parse_bag_id(bag_id)
    if await bag_repo.delete(username, parsed_id):
        logger.info(f"Deleted bag {bag_id} for {username}")
    return Response(status_code=200)
