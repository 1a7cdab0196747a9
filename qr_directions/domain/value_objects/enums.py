"""Domain enums: pure Python, no external dependencies."""

from enum import Enum


class WorkflowStatus(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    FAILED = "failed"


class ResolutionVariant(str, Enum):
    EXACT = "exact"
    FALLBACK = "fallback"


class GeocodeFailure(str, Enum):
    """Why a geocoding attempt did not produce a location.

    Every reason leads to the same fallback path; the value only feeds logs
    and the snapshot's ``fallback_reason``.
    """

    REQUEST_FAILED = "request_failed"
    TRANSPORT = "transport"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
