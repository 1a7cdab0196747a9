"""ResolveDestinationUseCase: destination text → directions link → QR image reference."""

from __future__ import annotations

import logging
from collections.abc import Callable

from qr_directions.application.ports.geocoder_port import GeocoderPort
from qr_directions.application.ports.qr_renderer_port import QRRendererPort
from qr_directions.domain.entities.resolution import (
    Failed,
    Resolution,
    Resolved,
    WorkflowSnapshot,
)
from qr_directions.domain.entities.resolved_location import ResolvedLocation
from qr_directions.domain.errors import GeocodeError, ValidationError, WorkflowBusyError
from qr_directions.domain.policies.deep_link import (
    GOOGLE_MAPS_DIRECTIONS_URL,
    build_from_address,
    build_from_coordinates,
)
from qr_directions.domain.value_objects.enums import (
    GeocodeFailure,
    ResolutionVariant,
    WorkflowStatus,
)

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred"

SettledCallback = Callable[[Resolution], None]


class ResolveDestinationUseCase:
    """Owns the state of one destination-resolution session.

    The presentation layer reads ``snapshot()`` and calls ``execute()``; it never
    mutates the slots directly. Only one run may be in flight at a time.
    """

    def __init__(
        self,
        geocoder: GeocoderPort,
        qr_renderer: QRRendererPort,
        directions_url: str = GOOGLE_MAPS_DIRECTIONS_URL,
        on_settled: SettledCallback | None = None,
    ):
        self._geocoder = geocoder
        self._qr = qr_renderer
        self._directions_url = directions_url
        self._on_settled = on_settled

        self._status = WorkflowStatus.IDLE
        self._in_progress = False
        self._error: str | None = None
        self._location: ResolvedLocation | None = None
        self._directions_link: str | None = None
        self._qr_image_url: str | None = None
        self._variant: ResolutionVariant | None = None
        self._fallback_reason: GeocodeFailure | None = None

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    def snapshot(self) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            status=self._status,
            in_progress=self._in_progress,
            error=self._error,
            location=self._location,
            directions_link=self._directions_link,
            qr_image_url=self._qr_image_url,
            variant=self._variant,
            fallback_reason=self._fallback_reason,
        )

    async def execute(self, query: str | None) -> Resolution:
        """Resolve ``query`` into a directions link and QR image reference.

        Pipeline:
        1. Reset previous results
        2. Validate the trimmed query (no network call when empty)
        3. Geocode; on success link to the coordinates
        4. On GeocodeError link to the raw query instead (fallback, still a success)

        Returns:
            Resolved (EXACT or FALLBACK) or Failed. Raises WorkflowBusyError
            when a previous run has not settled yet. Errors raised by the
            ``on_settled`` callback propagate after the workflow has settled.
        """
        if self._in_progress:
            raise WorkflowBusyError()

        self._reset()
        self._in_progress = True
        result: Resolution
        try:
            trimmed = (query or "").strip()
            if not trimmed:
                raise ValidationError()

            self._status = WorkflowStatus.RESOLVING
            result = await self._resolve(trimmed)
            self._apply(result)
        except ValidationError as e:
            logger.info("Rejected destination query: %s", e)
            result = self._fail(Failed(message=str(e)))
        except Exception as e:
            logger.exception("Unexpected error while resolving '%s'", query)
            result = self._fail(Failed(message=str(e) or UNKNOWN_ERROR, expected=False))
        finally:
            self._in_progress = False

        if self._on_settled is not None:
            self._on_settled(result)
        return result

    async def _resolve(self, query: str) -> Resolved:
        try:
            location = await self._geocoder.geocode(query)
        except GeocodeError as e:
            logger.warning(
                "Geocoding failed for '%s' (%s: %s) → using address directly",
                query, e.reason.value, e,
            )
            link = build_from_address(query, self._directions_url)
            return Resolved(
                variant=ResolutionVariant.FALLBACK,
                query=query,
                directions_link=link,
                qr_image_url=self._qr.image_url(link),
                fallback_reason=e.reason,
            )

        link = build_from_coordinates(location.latitude, location.longitude, self._directions_url)
        logger.info(
            "Resolved '%s' → %s (%f, %f)",
            query, location.display_name, location.latitude, location.longitude,
        )
        return Resolved(
            variant=ResolutionVariant.EXACT,
            query=query,
            directions_link=link,
            qr_image_url=self._qr.image_url(link),
            location=location,
        )

    def _reset(self) -> None:
        self._status = WorkflowStatus.IDLE
        self._error = None
        self._location = None
        self._directions_link = None
        self._qr_image_url = None
        self._variant = None
        self._fallback_reason = None

    def _apply(self, result: Resolved) -> None:
        self._status = WorkflowStatus.RESOLVED
        self._variant = result.variant
        self._location = result.location
        self._directions_link = result.directions_link
        self._qr_image_url = result.qr_image_url
        self._fallback_reason = result.fallback_reason

    def _fail(self, result: Failed) -> Failed:
        self._reset()
        self._status = WorkflowStatus.FAILED
        self._error = result.message
        return result
