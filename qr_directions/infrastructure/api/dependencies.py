"""FastAPI dependency injection: wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends

from qr_directions.adapters.geocoder.nominatim_adapter import NominatimAdapter
from qr_directions.adapters.qr.qrserver_adapter import QRServerAdapter
from qr_directions.application.ports.geocoder_port import GeocoderPort
from qr_directions.application.ports.qr_renderer_port import QRRendererPort
from qr_directions.application.use_cases.export_qr import ExportQRUseCase
from qr_directions.application.use_cases.resolve_destination import ResolveDestinationUseCase
from qr_directions.config import settings

# Singleton adapters (stateless)
_geocoder_adapter = NominatimAdapter()
_qr_adapter = QRServerAdapter()


def get_geocoder() -> GeocoderPort:
    return _geocoder_adapter


def get_qr_renderer() -> QRRendererPort:
    return _qr_adapter


def get_resolve_destination_uc(
    geocoder: GeocoderPort = Depends(get_geocoder),
    qr_renderer: QRRendererPort = Depends(get_qr_renderer),
) -> ResolveDestinationUseCase:
    # One workflow per request: each HTTP call is its own resolution session
    return ResolveDestinationUseCase(
        geocoder=geocoder,
        qr_renderer=qr_renderer,
        directions_url=settings.maps_directions_url,
    )


def get_export_qr_uc(
    qr_renderer: QRRendererPort = Depends(get_qr_renderer),
) -> ExportQRUseCase:
    return ExportQRUseCase(qr_renderer=qr_renderer, filename=settings.qr_download_filename)
