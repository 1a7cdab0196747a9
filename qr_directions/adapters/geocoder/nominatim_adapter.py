"""Nominatim geocoder adapter: implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PayloadError

from qr_directions.application.ports.geocoder_port import GeocoderPort
from qr_directions.config import settings
from qr_directions.domain.entities.resolved_location import ResolvedLocation
from qr_directions.domain.errors import GeocodeError
from qr_directions.domain.value_objects.enums import GeocodeFailure
from qr_directions.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class NominatimPlace(BaseModel):
    """One element of a Nominatim ``/search?format=json`` response.

    ``lat`` and ``lon`` arrive as text; pydantic coerces them to floats and
    rejects anything that is not a finite number in range.
    """

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    display_name: str
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)

    def to_location(self) -> ResolvedLocation:
        return ResolvedLocation(
            display_name=self.display_name,
            point=GeoPoint(latitude=self.lat, longitude=self.lon),
        )


def decode_first_place(payload: object) -> ResolvedLocation:
    """Decode the best match out of a search response body.

    Raises:
        GeocodeError: the body is not a non-empty list, or its first element is
            not a well-formed place.
    """
    if not isinstance(payload, list) or not payload:
        raise GeocodeError.not_found()
    try:
        place = NominatimPlace.model_validate(payload[0])
    except PayloadError as e:
        logger.debug("Malformed Nominatim result %r: %s", payload[0], e)
        raise GeocodeError.not_found(GeocodeFailure.MALFORMED) from e
    return place.to_location()


class NominatimAdapter(GeocoderPort):
    """Single-attempt Nominatim search, no caching."""

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout
        self._url = url or settings.geocoder_url
        self._transport = transport

    async def geocode(self, query: str) -> ResolvedLocation:
        """Geocode a query string to its first Nominatim match."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    params={"format": "json", "q": query, "limit": 1},
                    headers={
                        "Accept": "application/json",
                        "User-Agent": self._user_agent,
                    },
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.warning("Nominatim request error for '%s': %s", query, e)
            raise GeocodeError.request_failed(GeocodeFailure.TRANSPORT) from e

        if not response.is_success:
            logger.warning("Nominatim returned HTTP %d for '%s'", response.status_code, query)
            raise GeocodeError.request_failed()

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Nominatim returned a non-JSON body for '%s'", query)
            raise GeocodeError.request_failed() from e

        location = decode_first_place(payload)
        logger.info(
            "Nominatim resolved '%s' → (%f, %f)", query, location.latitude, location.longitude
        )
        return location
