from __future__ import annotations

import math
from typing import Any

from geoutils.core.constants import GEODETIC
from geoutils.utils.coords import clamp, get_field, is_number
from geoutils.utils.geohash import decode_center


DEFAULT_RADIUS_M = 100_000.0

_HALF_PI = math.pi / 2.0


def _lat_lon_pair(a: Any, b: Any) -> tuple[float, float, float, float] | None:
    values = (
        get_field(a, "latitude"),
        get_field(a, "longitude"),
        get_field(b, "latitude"),
        get_field(b, "longitude"),
    )
    if not all(is_number(v) for v in values):
        return None
    lat1, lon1, lat2, lon2 = (float(v) for v in values)
    return lat1, lon1, lat2, lon2


def _planar_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    # Equirectangular approximation; longitude shrinks with cos(mean latitude).
    m = GEODETIC.meters_per_degree
    lat_scale = math.cos((lat1 + lat2) / 2.0 * GEODETIC.radians_per_degree)
    return math.hypot((lat2 - lat1) * m, (lon2 - lon1) * m * lat_scale)


def _haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    rad = GEODETIC.radians_per_degree
    phi1 = clamp(-_HALF_PI, lat1 * rad, _HALF_PI)
    phi2 = clamp(-_HALF_PI, lat2 * rad, _HALF_PI)
    dphi = clamp(-math.pi, (lat2 - lat1) * rad, math.pi)
    dlambda = clamp(-math.pi, (lon2 - lon1) * rad, math.pi)

    h = (
        math.sin(dphi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    )
    # Rounding can push h a hair past 1 for antipodal points.
    h = clamp(0.0, h, 1.0)
    return GEODETIC.earth_radius_m * 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))


def get_distance(a: Any, b: Any, *, high_accuracy: bool = False) -> float:
    """Distance in meters between two coordinates.

    ``a`` and ``b`` may be ``Coordinate`` instances, mappings or any object
    with ``latitude``/``longitude``. Returns ``nan`` (never raises) when any
    of the four values is not a finite number.

    The default planar approximation is cheaper than the haversine formula
    used with ``high_accuracy=True`` and drifts from it by a few percent at
    intercontinental range.
    """

    pair = _lat_lon_pair(a, b)
    if pair is None:
        return math.nan
    if high_accuracy:
        return _haversine_m(*pair)
    return _planar_m(*pair)


def check_location(
    point: Any,
    reference: Any,
    *,
    radius: float = DEFAULT_RADIUS_M,
    high_accuracy: bool = False,
) -> bool:
    """True when ``point`` is strictly closer than ``radius`` meters to ``reference``."""

    return get_distance(reference, point, high_accuracy=high_accuracy) < radius


def get_geohash_distance(
    geohash1: str, geohash2: str, *, high_accuracy: bool = False
) -> float:
    lat1, lon1 = decode_center(geohash1)
    lat2, lon2 = decode_center(geohash2)
    return get_distance(
        {"latitude": lat1, "longitude": lon1},
        {"latitude": lat2, "longitude": lon2},
        high_accuracy=high_accuracy,
    )


def check_geohash(
    geohash: str,
    coords: Any,
    *,
    radius: float = DEFAULT_RADIUS_M,
    high_accuracy: bool = False,
) -> bool:
    latitude, longitude = decode_center(geohash)
    return check_location(
        {"latitude": latitude, "longitude": longitude},
        coords,
        radius=radius,
        high_accuracy=high_accuracy,
    )
