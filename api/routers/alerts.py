"""
Global alerts router.

Alerts are service-wide notices shown to every user between their start and
end dates. They are not tied to a user.

Endpoints:
- GET /alerts/ - Greeting
- GET /alerts/all - List every alert
- GET /alerts/active - List alerts active right now
- POST /alerts/ - Create an alert
- DELETE /alerts/ - Delete alerts matching an end date and text
- DELETE /alerts/{alert_id} - Delete one alert by ID
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as PydanticValidationError

from api.dependencies import get_alert_repository, get_json_object
from api.schemas.alerts import (
    AlertListResponse,
    AlertRecord,
    CreateAlertRequest,
    DeleteAlertRequest,
)
from core.exceptions import AlertNotFoundError, BadRequestError
from database.repositories import AlertRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alerts", tags=["alerts"])


def _invalid_body(e: PydanticValidationError) -> BadRequestError:
    fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
    return BadRequestError(message=f"Error parsing request body: invalid {fields}")


@router.get("", response_class=PlainTextResponse, include_in_schema=False)
@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return "Hello from alerts.\n"


@router.get("/all", response_model=AlertListResponse)
async def get_all_alerts(
    alert_repo: AlertRepository = Depends(get_alert_repository),
):
    alerts = await alert_repo.list_all()
    return AlertListResponse(alerts=[AlertRecord.model_validate(a) for a in alerts])


@router.get("/active", response_model=AlertListResponse)
async def get_active_alerts(
    alert_repo: AlertRepository = Depends(get_alert_repository),
):
    """List the alerts whose display window contains the current time."""
    alerts = await alert_repo.list_active()
    return AlertListResponse(alerts=[AlertRecord.model_validate(a) for a in alerts])


@router.post("", response_model=AlertRecord, status_code=201, include_in_schema=False)
@router.post("/", response_model=AlertRecord, status_code=201)
async def create_alert(
    body: dict[str, Any] = Depends(get_json_object),
    alert_repo: AlertRepository = Depends(get_alert_repository),
):
    """
    Create a global alert.

    ``end_date`` is required. Without ``start_date`` the alert is active
    immediately.
    """
    try:
        request = CreateAlertRequest.model_validate(body)
    except PydanticValidationError as e:
        raise _invalid_body(e) from e

    if request.end_date is None:
        raise BadRequestError(message="end_date is required")

    record = await alert_repo.create(
        end_date=request.end_date,
        alert=request.alert,
        start_date=request.start_date,
    )
    logger.info(f"Created alert {record.id} ending {record.end_date.isoformat()}")
    return AlertRecord.model_validate(record)


@router.delete("", include_in_schema=False)
@router.delete("/")
async def delete_alert(
    body: dict[str, Any] = Depends(get_json_object),
    alert_repo: AlertRepository = Depends(get_alert_repository),
) -> Response:
    """
    Delete every alert with exactly this end date and text.

    Matching nothing is not an error.
    """
    try:
        request = DeleteAlertRequest.model_validate(body)
    except PydanticValidationError as e:
        raise _invalid_body(e) from e

    count = await alert_repo.delete_matching(request.end_date, request.alert)
    logger.info(f"Deleted {count} alerts ending {request.end_date.isoformat()}")
    return Response(status_code=200)


@router.delete("/{alert_id}")
async def delete_alert_by_id(
    alert_id: str,
    alert_repo: AlertRepository = Depends(get_alert_repository),
) -> Response:
    try:
        parsed_id = UUID(alert_id)
    except ValueError as e:
        raise BadRequestError(message=f"invalid alert ID {alert_id}") from e

    if not await alert_repo.delete_by_id(parsed_id):
        raise AlertNotFoundError(message=f"alert {alert_id} not found")
    logger.info(f"Deleted alert {alert_id}")
    return Response(status_code=200)
