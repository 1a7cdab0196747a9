"""Health check endpoint."""

from fastapi import APIRouter

from qr_directions.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report service status and the upstream services it relies on."""
    return {
        "status": "ok",
        "service": "QR Directions Generator",
        "geocoder": settings.geocoder_url,
        "qr_renderer": settings.qr_api_url,
    }
