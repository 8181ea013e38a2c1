"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if the process is up

Design Decisions:
    - No readiness probe: the store is in memory, there is nothing external to check
"""

import logging

from fastapi import APIRouter, status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "exercise-tracker-api",
        "version": "1.0.0",
    }
