from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    min: float
    max: float

    @property
    def mid(self) -> float:
        return (self.min + self.max) / 2.0

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Latitude/longitude rectangle covered by a geohash."""

    latitude: Interval
    longitude: Interval

    @property
    def center(self) -> tuple[float, float]:
        return self.latitude.mid, self.longitude.mid

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.latitude.contains(latitude) and self.longitude.contains(
            longitude
        )
