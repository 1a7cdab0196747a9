"""QR Directions: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qr_directions.config import settings
from qr_directions.infrastructure.api.routes_directions import router as directions_router
from qr_directions.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        "Geocoding via %s, QR images via %s (%dx%d)",
        settings.geocoder_url, settings.qr_api_url, settings.qr_size, settings.qr_size,
    )
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="QR Directions Generator",
        description="Turn a destination into a QR code that opens map directions",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the browser frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(directions_router, prefix="/api")

    return app


app = create_app()
