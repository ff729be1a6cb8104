from __future__ import annotations

from dataclasses import dataclass, field

from geoutils.models.coordinate import Coordinate


@dataclass(frozen=True, slots=True)
class GeoURIParams:
    zoom: int | None = None
    query: str | None = None
    type: str | None = None
    # Any other parameters, in the order they appeared.
    extras: tuple[tuple[str, str], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class GeoURI:
    coords: Coordinate
    params: GeoURIParams
