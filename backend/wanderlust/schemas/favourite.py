"""
Wanderlust Backend: Favourite Schemas
=======================================

What:  Request and response models for the /favourites endpoints.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from wanderlust.schemas.common import RequestBody


class FavouriteCreate(RequestBody):
    """Body of POST /favourites. Both fields are required by FavouriteService.add()."""
    name: Optional[str] = None
    description: Optional[str] = None


class FavouriteResponse(BaseModel):
    """One saved place, as listed by GET /favourites."""
    id: uuid.UUID = Field(description="Favourite identifier, used by DELETE /favourites/{id}")
    name: str
    description: str
    added_at: datetime = Field(
        serialization_alias="addedAt",
        description="When the place was saved (UTC ISO 8601)",
    )

    model_config = {"from_attributes": True}
