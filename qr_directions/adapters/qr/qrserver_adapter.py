"""QR Server (api.qrserver.com) adapter: implements QRRendererPort."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import httpx

from qr_directions.application.ports.qr_renderer_port import QRRendererPort
from qr_directions.config import settings
from qr_directions.domain.errors import ClipboardError, ExportError
from qr_directions.domain.policies.qr_payload import build_image_url, extract_payload

logger = logging.getLogger(__name__)


class QRServerAdapter(QRRendererPort):
    """Images are rendered remotely; this adapter only builds and fetches URLs."""

    def __init__(
        self,
        size: int | None = None,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._size = size or settings.qr_size
        self._url = url or settings.qr_api_url
        self._timeout = timeout if timeout is not None else settings.qr_fetch_timeout
        self._transport = transport

    def image_url(self, payload: str) -> str:
        return build_image_url(payload, size=self._size, base_url=self._url)

    def extract_payload(self, image_url: str) -> str:
        return extract_payload(image_url)

    def _check_reference(self, image_url: str) -> None:
        """Only image URLs pointing at the configured endpoint may be fetched."""
        expected = urlsplit(self._url)
        actual = urlsplit(image_url)
        if (actual.scheme, actual.netloc, actual.path) != (
            expected.scheme,
            expected.netloc,
            expected.path,
        ):
            logger.warning("Refusing to fetch foreign QR image reference %s", image_url)
            raise ExportError("not a QR code generated by this service")
        try:
            extract_payload(image_url)
        except ClipboardError as e:
            raise ExportError("QR image reference has no data parameter") from e

    async def fetch_png(self, image_url: str) -> bytes:
        self._check_reference(image_url)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(image_url, timeout=self._timeout)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("QR image fetch failed for %s: %s", image_url, e)
            raise ExportError("could not download the QR code") from e
        return response.content
