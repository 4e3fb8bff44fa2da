"""
Wanderlust Backend: Liveness and Health Routes
================================================

What:  GET / answers with a plain-text liveness line (no store access).
       GET /health probes the database and reports overall status.
Who:   Browsers, Docker health checks, load balancers.

Status levels (GET /health):
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from wanderlust import __version__
from wanderlust.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness check",
)
async def root() -> str:
    return "Wanderlust backend is running!"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """
    Check the service and its database.

    Runs SELECT 1 against the store; any failure marks the service unhealthy.
    """
    database = request.app.state.db
    if await database.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
