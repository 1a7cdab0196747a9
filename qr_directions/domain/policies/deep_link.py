"""Map deep-link construction: pure functions, no I/O.

Links request directions to a single destination and leave the origin to the
map app (usually the device's current location).
"""

from urllib.parse import quote

from qr_directions.domain.value_objects.geo_point import GeoPoint

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/"

# Characters encodeURIComponent leaves alone besides ASCII letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    """Percent-encode ``text`` the way browsers' encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def _build(destination: str, base_url: str) -> str:
    return f"{base_url}?api=1&destination={destination}"


def build_from_coordinates(
    latitude: float, longitude: float, base_url: str = GOOGLE_MAPS_DIRECTIONS_URL
) -> str:
    """Directions link whose destination is ``<lat>,<lng>``."""
    return _build(GeoPoint(latitude=latitude, longitude=longitude).as_destination(), base_url)


def build_from_address(raw_text: str, base_url: str = GOOGLE_MAPS_DIRECTIONS_URL) -> str:
    """Directions link whose destination is the percent-encoded raw text."""
    return _build(encode_uri_component(raw_text), base_url)
