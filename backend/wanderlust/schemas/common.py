"""
Wanderlust Backend: Shared Pydantic Schemas
=============================================

What:  The response envelopes every endpoint shares, plus the base class
       for request bodies.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class RequestBody(BaseModel):
    """
    Base for request bodies posted as JSON or as an HTML form.

    Every field is optional text: presence is a business rule checked by
    the services (so a missing field is a 400 with a readable message, not
    FastAPI's 422). Scalars are coerced to text and surrounding whitespace
    is stripped; nested objects and arrays count as missing.
    """

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, (dict, list, tuple)):
            return None
        if isinstance(v, bool):
            return "true" if v else "false"
        return str(v).strip()


class MessageResponse(BaseModel):
    """
    What:  Outcome of a write, or the body of any `{success, message}` error.

    Example:
        {"success": true, "message": "Added to Favourites!"}
    """
    success: bool = Field(description="Whether the operation succeeded")
    message: str = Field(description="Human-readable outcome")


class ValidationErrorResponse(BaseModel):
    """
    What:  400 body for the contact form, one message per failing rule.

    Example:
        {"success": false, "errors": ["Name is required.", "Please enter a message."]}
    """
    success: bool = Field(default=False)
    errors: List[str] = Field(description="Every failing rule's message, in rule order")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
