"""Health check endpoints for monitoring."""

from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "quota-image-api"}
