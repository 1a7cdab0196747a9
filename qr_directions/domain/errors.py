"""Domain exceptions."""

from __future__ import annotations

from qr_directions.domain.value_objects.enums import GeocodeFailure


class QRDirectionsError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(QRDirectionsError):
    """The destination query is empty or missing."""

    def __init__(self, message: str = "missing destination"):
        super().__init__(message)


class GeocodeError(QRDirectionsError):
    """Geocoding did not produce a usable location.

    Not fatal: the resolution workflow converts it into the fallback path.
    """

    def __init__(self, message: str, reason: GeocodeFailure):
        super().__init__(message)
        self.reason = reason

    @classmethod
    def request_failed(cls, reason: GeocodeFailure = GeocodeFailure.REQUEST_FAILED) -> GeocodeError:
        return cls("request failed", reason)

    @classmethod
    def not_found(cls, reason: GeocodeFailure = GeocodeFailure.NOT_FOUND) -> GeocodeError:
        return cls("address not found", reason)


class ClipboardError(QRDirectionsError):
    """The directions link could not be recovered from a QR image reference."""


class ExportError(QRDirectionsError):
    """The QR image could not be fetched for download."""


class WorkflowBusyError(QRDirectionsError):
    """A resolution is already in flight for this workflow."""

    def __init__(self, message: str = "a destination is already being resolved"):
        super().__init__(message)
