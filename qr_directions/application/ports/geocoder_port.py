"""Port interface for geocoding destination queries."""

from abc import ABC, abstractmethod

from qr_directions.domain.entities.resolved_location import ResolvedLocation


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, query: str) -> ResolvedLocation:
        """Resolve a free-text query to its best-matching location.

        Makes exactly one attempt.

        Raises:
            GeocodeError: the request failed or returned no usable match.
        """
        ...
