from __future__ import annotations

from typing import Any


class GeoInputError(ValueError):
    """Rejected geographic input.

    ``code`` is the error envelope code; ``details`` echoes the offending
    input back to HTTP callers.
    """

    code = "GEO_INPUT_INVALID"

    def __init__(self, message: str, *, details: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidGeohashError(GeoInputError):
    """Geohash is empty or contains a character outside the base32 alphabet."""

    code = "GEOHASH_INVALID"


class InvalidGeoURIError(GeoInputError):
    """String is not a well-formed ``geo:`` URI."""

    code = "GEO_URI_INVALID"


class CoordinateRangeError(GeoInputError):
    """Latitude/longitude could not be parsed or is out of range."""

    code = "COORDINATE_OUT_OF_RANGE"


def make_error_payload(
    *, code: str, message: str, trace_id: str | None, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
        "trace_id": trace_id,
    }
