"""ResolvedLocation: best geocoding match for a destination query."""

from dataclasses import dataclass

from qr_directions.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class ResolvedLocation:
    display_name: str
    point: GeoPoint

    @property
    def latitude(self) -> float:
        return self.point.latitude

    @property
    def longitude(self) -> float:
        return self.point.longitude
