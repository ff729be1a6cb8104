"""Immutable value types shared by the codec, services and API."""

from __future__ import annotations

from geoutils.models.bounding_box import BoundingBox, Interval
from geoutils.models.coordinate import Coordinate, Position
from geoutils.models.geo_uri import GeoURI, GeoURIParams

__all__ = [
    "BoundingBox",
    "Coordinate",
    "GeoURI",
    "GeoURIParams",
    "Interval",
    "Position",
]
