"""
Global alert schemas.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlertRecord(BaseModel):
    """A stored global alert."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    start_date: Optional[datetime] = None
    end_date: datetime
    alert: str

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Some backends hand back naive datetimes; stored values are always UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class AlertListResponse(BaseModel):
    """A list of alerts, soonest-expiring first."""

    alerts: List[AlertRecord] = Field(default_factory=list)


class CreateAlertRequest(BaseModel):
    """
    Request body for creating an alert.

    ``end_date`` is required; a missing value is rejected with 400 by the
    router rather than by validation.
    """

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    alert: str = ""


class DeleteAlertRequest(BaseModel):
    """Identifies the alerts to delete by exact end date and text."""

    end_date: datetime
    alert: str = ""
