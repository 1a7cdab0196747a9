"""Pytest configuration and shared fixtures."""

import pytest

from qr_directions.application.ports.qr_renderer_port import QRRendererPort
from qr_directions.domain.errors import ExportError
from qr_directions.domain.policies.qr_payload import build_image_url, extract_payload


class FakeQRRenderer(QRRendererPort):
    """Builds real image URLs, records payloads, serves canned PNG bytes."""

    png = b"\x89PNG\r\n\x1a\nfake-qr"

    def __init__(self):
        self.payloads: list[str] = []
        self.fail_fetch = False

    def image_url(self, payload):
        self.payloads.append(payload)
        return build_image_url(payload)

    def extract_payload(self, image_url):
        return extract_payload(image_url)

    async def fetch_png(self, image_url):
        if self.fail_fetch:
            raise ExportError("could not download the QR code")
        return self.png


@pytest.fixture
def qr_renderer():
    return FakeQRRenderer()
