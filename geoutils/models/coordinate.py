from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coordinate:
    """WGS84 point in decimal degrees.

    ``altitude`` is meters above the reference ellipsoid and ``accuracy`` is
    the radius of uncertainty in meters; both are optional.
    """

    latitude: float
    longitude: float
    altitude: float | None = None
    accuracy: float | None = None


@dataclass(frozen=True, slots=True)
class Position:
    # Result of a single position provider request.
    coords: Coordinate
    timestamp: float | None = None
