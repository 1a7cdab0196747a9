"""ExportQRUseCase: copy-link and download actions for a generated QR code."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from qr_directions.application.ports.qr_renderer_port import QRRendererPort
from qr_directions.domain.errors import ClipboardError, ExportError

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_FILENAME = "directions-qr-code.png"


@dataclass(frozen=True)
class QRDownload:
    filename: str
    content: bytes
    media_type: str = "image/png"


class ExportQRUseCase:
    """Exports never touch resolution state; their failures are reported only."""

    def __init__(self, qr_renderer: QRRendererPort, filename: str = DEFAULT_DOWNLOAD_FILENAME):
        self._qr = qr_renderer
        self._filename = filename

    def copy_link(self, qr_image_url: str | None) -> str:
        """Re-derive the directions link from a stored QR image reference."""
        if not qr_image_url:
            raise ClipboardError("no QR code has been generated")
        link = self._qr.extract_payload(qr_image_url)
        if not link:
            raise ClipboardError("QR image reference has an empty payload")
        logger.debug("Recovered directions link %s", link)
        return link

    async def download(self, qr_image_url: str | None) -> QRDownload:
        """Fetch the rendered QR image as a PNG download."""
        if not qr_image_url:
            raise ExportError("no QR code has been generated")
        content = await self._qr.fetch_png(qr_image_url)
        logger.info("Fetched QR image (%d bytes) for download", len(content))
        return QRDownload(filename=self._filename, content=content)
