"""Health check endpoints for TubeSearch."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """Liveness probe: the process is up and serving requests."""
    return {"ok": True}


@router.get("/readyz")
async def readiness_check():
    """
    Readiness probe.

    The schema is created during startup, so once requests are being served
    the application is ready.

    Returns:
        A simple status object
    """
    return {"ok": True}
