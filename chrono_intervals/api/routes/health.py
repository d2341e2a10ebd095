"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)

Design Decisions:
    - No readiness probe: the service has no backing store to wait for
"""

import logging
from fastapi import APIRouter, status

from chrono_intervals import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "chrono-intervals-api",
        "version": __version__,
    }
