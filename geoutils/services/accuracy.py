"""Positional accuracy estimates for geohashes and raw coordinates.

Both geohash functions read the same table, so
``estimate_geohash_accuracy`` of a hash ``calculate_geohash_length(x)`` long
is always <= x.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from geoutils.core.constants import GEODETIC, MAX_GEOHASH_LENGTH
from geoutils.utils.coords import coerce_float, get_field, is_number


def estimate_geohash_accuracy(geohash: Any) -> float:
    """Expected error in meters for a geohash of this length (``nan`` for non-str)."""

    if not isinstance(geohash, str):
        return math.nan
    table = GEODETIC.geohash_accuracy_m
    return table[min(len(geohash), MAX_GEOHASH_LENGTH)]


def calculate_geohash_length(meters: Any) -> int | float:
    """Shortest geohash length (1..12) whose expected error is <= ``meters``.

    ``inf`` maps to 0. Negative, ``nan`` and non-numeric input give ``nan``.
    """

    if isinstance(meters, bool) or not isinstance(meters, (int, float)):
        return math.nan
    if math.isnan(meters) or meters < 0:
        return math.nan
    if meters == math.inf:
        return 0

    table = GEODETIC.geohash_accuracy_m
    for length in range(1, MAX_GEOHASH_LENGTH + 1):
        if table[length] <= meters:
            return length
    return MAX_GEOHASH_LENGTH


def _decimal_places(value: float) -> int:
    # repr() is the shortest string that round-trips, e.g. 57.64911 -> 5.
    exponent = Decimal(repr(value)).as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def estimate_coordinate_accuracy(coord: Any) -> float:
    """Meters of precision implied by the coordinate.

    An explicit numeric ``accuracy`` wins. Otherwise each decimal place of
    the latitude divides one degree of latitude (scaled by cos(latitude))
    by ten.

    See https://gis.stackexchange.com/questions/8650/measuring-accuracy-of-latitude-and-longitude
    """

    accuracy = get_field(coord, "accuracy")
    if isinstance(accuracy, (int, float)) and not isinstance(accuracy, bool):
        return float(accuracy)

    try:
        latitude = coerce_float(get_field(coord, "latitude"))
    except (TypeError, ValueError):
        return math.nan
    if not is_number(latitude):
        return math.nan

    baseline = GEODETIC.meters_per_degree * math.cos(
        latitude * GEODETIC.radians_per_degree
    )
    if latitude.is_integer():
        return baseline
    return baseline / 10 ** _decimal_places(latitude)


def geohash_length_for_coordinate(coord: Any) -> int:
    """Geohash length matching the coordinate's accuracy, at least 1.

    A negative or non-numeric ``accuracy`` falls back to the latitude's
    decimal places.
    """

    length = calculate_geohash_length(estimate_coordinate_accuracy(coord))
    if isinstance(length, float):
        length = calculate_geohash_length(
            estimate_coordinate_accuracy({"latitude": get_field(coord, "latitude")})
        )
    if isinstance(length, float):
        raise ValueError(f"Cannot derive a geohash length from {coord!r}")
    return max(1, length)
