"""
Wanderlust Backend: Request Body Parsing
==========================================

What:  Reads a request body posted either as JSON or as an HTML form.
How:   Dispatches on Content-Type:
           application/json (and */*+json)   → JSON object
           application/x-www-form-urlencoded → form fields
           multipart/form-data               → form fields (files ignored)
       Anything else, or an empty body, reads as {}.
"""

import json
from typing import Any, Dict

from fastapi import Request

from wanderlust.exceptions import ValidationError

FORM_CONTENT_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def read_body(request: Request) -> Dict[str, Any]:
    """
    Return the request body as a flat dict.

    Raises:
        ValidationError: The body claims to be JSON but does not parse.
    """
    media_type = _media_type(request)

    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    if media_type == "application/json" or media_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise ValidationError(
                message="Malformed request body.",
                context={"content_type": media_type, "size": len(raw)},
            )
        # Arrays and scalars carry no named fields
        return data if isinstance(data, dict) else {}

    return {}
