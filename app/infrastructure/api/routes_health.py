"""Health check endpoint."""

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report liveness and which geocoding provider is configured."""
    return {
        "status": "ok",
        "service": "geodistance",
        "geocoder": settings.geocoder_base_url,
    }
