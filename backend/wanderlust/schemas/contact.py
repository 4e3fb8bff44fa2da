"""
Wanderlust Backend: Contact Schemas
=====================================

What:  Request and response models for POST /contact and GET /submissions.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from wanderlust.schemas.common import RequestBody


class ContactSubmission(RequestBody):
    """Body of POST /contact. Checked by ContactService.validate()."""
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    """One stored submission, as listed by GET /submissions."""
    id: uuid.UUID = Field(description="Submission identifier")
    name: str
    email: str
    message: str
    submitted_at: datetime = Field(
        serialization_alias="submittedAt",
        description="When the submission was received (UTC ISO 8601)",
    )

    model_config = {"from_attributes": True}
