"""GeoPoint value object: immutable (lat, lon) pair."""

from dataclasses import dataclass
from decimal import Decimal


def format_coordinate(value: float) -> str:
    """Render a coordinate as the shortest positional text that round-trips.

    Integral values drop the fractional part (48.0 -> "48") and small values
    never use exponent notation (5e-05 -> "0.00005"), matching how browsers
    print plain numbers.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def as_destination(self) -> str:
        """Destination string in the "lat,lng" form map deep links expect."""
        return f"{format_coordinate(self.latitude)},{format_coordinate(self.longitude)}"
