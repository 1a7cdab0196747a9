"""QR image request URLs: build them around a payload and read the payload back."""

from urllib.parse import parse_qs, urlsplit

from qr_directions.domain.errors import ClipboardError
from qr_directions.domain.policies.deep_link import encode_uri_component

QR_SERVER_URL = "https://api.qrserver.com/v1/create-qr-code/"
DEFAULT_QR_SIZE = 200


def build_image_url(payload: str, size: int = DEFAULT_QR_SIZE, base_url: str = QR_SERVER_URL) -> str:
    """Image request URL rendering ``payload`` as a ``size``x``size`` QR code.

    The payload length is not checked; very long links may exceed what the
    rendering service accepts.
    """
    return f"{base_url}?size={size}x{size}&data={encode_uri_component(payload)}"


def extract_payload(image_url: str) -> str:
    """Decode the ``data`` parameter of a QR image URL.

    Raises:
        ClipboardError: the URL carries no ``data`` parameter.
    """
    query = urlsplit(image_url).query
    values = parse_qs(query, keep_blank_values=False).get("data")
    if not values:
        raise ClipboardError("QR image reference has no data parameter")
    return values[0]
