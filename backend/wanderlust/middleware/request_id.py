"""
Wanderlust Backend: Request ID Middleware
===========================================

What:  Gives every request a correlation ID, returns it in X-Request-ID and
       stamps it on every log record written while the request is handled.
How:   The ID lives in a ContextVar for the duration of the request.
       RequestIDLogFilter copies it onto each LogRecord as `request_id`,
       which the log format in main.setup_logging prints. Records written
       outside a request carry "-".

A client-supplied X-Request-ID is kept only if it is a short token of
letters, digits, '-', '_' or '.'; anything else is replaced, so log lines
cannot be forged through the header.
"""

import logging
import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: each concurrently handled request sees its own value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDLogFilter(logging.Filter):
    """Adds `record.request_id` so formatters can use %(request_id)s."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", ""):
            record.request_id = request_id_var.get("") or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds a request ID for the lifetime of one request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        supplied = request.headers.get("X-Request-ID", "")
        rid = supplied if _CLIENT_ID_PATTERN.fullmatch(supplied) else new_request_id()

        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
