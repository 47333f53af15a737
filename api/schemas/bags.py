"""
Bag schemas.
"""

from typing import Any, Dict, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BagRecord(BaseModel):
    """A stored bag document."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    contents: Dict[str, Any] = Field(default_factory=dict)
    user_id: UUID


class BagListResponse(BaseModel):
    """All bags belonging to a user."""

    bags: List[BagRecord] = Field(default_factory=list)


class AddBagResponse(BaseModel):
    """ID of a newly added bag."""

    id: UUID
