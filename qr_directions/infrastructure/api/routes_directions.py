"""Directions endpoints: generate a QR code, copy its link, download it."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from qr_directions.application.use_cases.export_qr import ExportQRUseCase
from qr_directions.application.use_cases.resolve_destination import ResolveDestinationUseCase
from qr_directions.domain.entities.resolution import Failed, WorkflowSnapshot
from qr_directions.domain.errors import ClipboardError, ExportError
from qr_directions.infrastructure.api.dependencies import (
    get_export_qr_uc,
    get_resolve_destination_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/directions", tags=["directions"])

# ── Request / Response schemas ──────────────────────────────────────


class DirectionsRequest(BaseModel):
    destination: str | None = None


class LocationPayload(BaseModel):
    name: str
    lat: float
    lng: float


class DirectionsResponse(BaseModel):
    status: str
    variant: str | None = None
    notice: str | None = None
    error: str | None = None
    location: LocationPayload | None = None
    directions_link: str | None = None
    qr_image_url: str | None = None
    fallback_reason: str | None = None


class LinkResponse(BaseModel):
    directions_link: str


# ── Helpers ─────────────────────────────────────────────────────────


def _to_response(snapshot: WorkflowSnapshot, notice: str | None) -> DirectionsResponse:
    location = snapshot.location
    return DirectionsResponse(
        status=snapshot.status.value,
        variant=snapshot.variant.value if snapshot.variant else None,
        notice=notice,
        error=snapshot.error,
        location=(
            LocationPayload(name=location.display_name, lat=location.latitude, lng=location.longitude)
            if location
            else None
        ),
        directions_link=snapshot.directions_link,
        qr_image_url=snapshot.qr_image_url,
        fallback_reason=snapshot.fallback_reason.value if snapshot.fallback_reason else None,
    )


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("", response_model=DirectionsResponse)
async def generate_qr_code(
    body: DirectionsRequest,
    workflow: ResolveDestinationUseCase = Depends(get_resolve_destination_uc),
):
    """Resolve a destination and return the QR image reference for its directions link."""
    result = await workflow.execute(body.destination)
    snapshot = workflow.snapshot()

    if isinstance(result, Failed):
        status_code = 422 if result.expected else 500
        payload = _to_response(snapshot, notice=result.message)
        return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))

    return _to_response(snapshot, notice=result.notice)


@router.get("/link", response_model=LinkResponse)
async def copy_link(
    qr: str = Query(..., description="QR image reference returned by POST /directions"),
    export_uc: ExportQRUseCase = Depends(get_export_qr_uc),
):
    """Recover the directions link encoded into a QR image reference."""
    try:
        link = export_uc.copy_link(qr)
    except ClipboardError as e:
        logger.warning("Could not copy link: %s", e)
        raise HTTPException(status_code=400, detail=f"Could not copy the link: {e}")
    return LinkResponse(directions_link=link)


@router.get("/qr.png")
async def download_qr_code(
    qr: str = Query(..., description="QR image reference returned by POST /directions"),
    export_uc: ExportQRUseCase = Depends(get_export_qr_uc),
):
    """Serve the rendered QR code as a PNG attachment."""
    try:
        download = await export_uc.download(qr)
    except ExportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return Response(
        content=download.content,
        media_type=download.media_type,
        headers={"Content-Disposition": f'attachment; filename="{download.filename}"'},
    )
