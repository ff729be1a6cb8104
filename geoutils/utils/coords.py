"""Small coordinate helpers shared by the services.

Parsing and validation are separate steps: ``coerce_float`` only parses,
``parse_coordinate`` parses and then range-checks.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from geoutils.core.constants import MAX_LAT, MAX_LON, MIN_LAT, MIN_LON
from geoutils.core.errors import CoordinateRangeError


def clamp(min_value: float, value: float, max_value: float) -> float:
    return min(max(value, min_value), max_value)


def is_number(value: Any) -> bool:
    """True for finite int/float values (bool is not a number here)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def between(min_value: float, value: Any, max_value: float) -> bool:
    # Inclusive on both ends.
    return is_number(value) and min_value <= value <= max_value


def is_valid_coordinate(latitude: Any, longitude: Any) -> bool:
    return between(MIN_LAT, latitude, MAX_LAT) and between(
        MIN_LON, longitude, MAX_LON
    )


def get_field(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-style object, else None."""

    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def coerce_float(value: Any) -> float:
    """Parse a number or numeric string into a float.

    Raises ValueError/TypeError when the value cannot be parsed.
    """

    if isinstance(value, bool):
        raise TypeError("bool is not a coordinate value")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise TypeError(f"Unsupported coordinate value: {type(value)!r}")


def parse_coordinate(latitude: Any, longitude: Any) -> tuple[float, float]:
    details = {"latitude": latitude, "longitude": longitude}
    try:
        lat = coerce_float(latitude)
        lon = coerce_float(longitude)
    except (TypeError, ValueError) as e:
        raise CoordinateRangeError(
            f"Invalid latitude/longitude: {latitude!r}, {longitude!r}",
            details=details,
        ) from e

    if not is_valid_coordinate(lat, lon):
        raise CoordinateRangeError(
            f"Invalid latitude/longitude: {lat}, {lon}", details=details
        )
    return lat, lon
