"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the lifespan has wired the directory (readiness)
    - Neither probe calls the upstream API

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - No upstream ping on readiness: probe traffic would count against upstream rate limits
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "employee-directory-facade",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — directory facade wired on app.state."""
    if getattr(request.app.state, "directory", None) is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "directory_unavailable",
            },
        )
    return {"status": "ready", "checks": {"directory": "wired"}}
