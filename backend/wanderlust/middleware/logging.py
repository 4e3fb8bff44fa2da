"""
Wanderlust Backend: Access Log Middleware
===========================================

What:  One access-log line per API call, on the `wanderlust.access` logger.
How:   After the response, the matched route's path template is logged
       rather than the raw URL, so DELETE /favourites/{favourite_id} lines
       group together and favourite ids stay out of the access log.

Levels:
    API routes       5xx → ERROR, 4xx → WARNING, else INFO
    static assets    DEBUG unless 5xx (the site's pages, images, scripts)
    /health          not logged (polled by health checks)

The request ID is added by RequestIDLogFilter, not here. Request bodies
are never logged (contact submissions carry personal data).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

logger = logging.getLogger("wanderlust.access")


def _route_label(request: Request) -> str:
    """Path template of the matched API route, or the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def _is_static(request: Request) -> bool:
    return isinstance(request.scope.get("endpoint"), StaticFiles)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log for API calls and static assets."""

    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif _is_static(request):
            log_level = logging.DEBUG
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        route = _route_label(request)
        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            log_level,
            "%s %s %d %.1fms from %s",
            request.method,
            route,
            status,
            duration_ms,
            client_ip,
            extra={"route": route, "status": status, "duration_ms": round(duration_ms, 2)},
        )
        return response
