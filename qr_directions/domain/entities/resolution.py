"""Resolution results and the workflow snapshot.

A run of the resolution workflow ends in exactly one of two shapes:

* ``Resolved``: a directions link and QR image reference were produced, either
  from geocoded coordinates (``EXACT``) or from the raw query (``FALLBACK``).
* ``Failed``: nothing was produced; ``message`` is what the user sees.
"""

from __future__ import annotations

from dataclasses import dataclass

from qr_directions.domain.entities.resolved_location import ResolvedLocation
from qr_directions.domain.value_objects.enums import (
    GeocodeFailure,
    ResolutionVariant,
    WorkflowStatus,
)

EXACT_NOTICE = "QR code generated successfully"
FALLBACK_NOTICE = "Could not find exact coordinates. Using address directly."


@dataclass(frozen=True)
class Resolved:
    variant: ResolutionVariant
    query: str
    directions_link: str
    qr_image_url: str
    location: ResolvedLocation | None = None
    fallback_reason: GeocodeFailure | None = None

    @property
    def is_exact(self) -> bool:
        return self.variant == ResolutionVariant.EXACT

    @property
    def notice(self) -> str:
        return EXACT_NOTICE if self.is_exact else FALLBACK_NOTICE


@dataclass(frozen=True)
class Failed:
    message: str
    # False when the failure came from an unexpected exception rather than input validation
    expected: bool = True


Resolution = Resolved | Failed


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Read-only copy of the workflow's result slots."""

    status: WorkflowStatus
    in_progress: bool
    error: str | None = None
    location: ResolvedLocation | None = None
    directions_link: str | None = None
    qr_image_url: str | None = None
    variant: ResolutionVariant | None = None
    fallback_reason: GeocodeFailure | None = None
