"""Port interface for the QR image rendering service."""

from abc import ABC, abstractmethod


class QRRendererPort(ABC):
    @abstractmethod
    def image_url(self, payload: str) -> str:
        """Return an image URL whose rendered QR code encodes ``payload``."""
        ...

    @abstractmethod
    def extract_payload(self, image_url: str) -> str:
        """Recover the payload encoded into an image URL built by ``image_url``.

        Raises:
            ClipboardError: the URL does not carry a payload.
        """
        ...

    @abstractmethod
    async def fetch_png(self, image_url: str) -> bytes:
        """Download the rendered image.

        Raises:
            ExportError: the image could not be fetched.
        """
        ...
