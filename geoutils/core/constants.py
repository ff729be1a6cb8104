"""Geodetic constants and geohash tables.

Everything here is computed once at import and never mutated.
"""

from __future__ import annotations

import dataclasses
import math
from types import MappingProxyType
from typing import Mapping


EARTH_RADIUS_METERS = 6_371_000.0
RADIANS_PER_DEGREE = math.pi / 180.0
# One degree of latitude in meters at the equator.
METERS_PER_DEGREE = 111_321.0

MIN_LAT, MAX_LAT = -90.0, 90.0
MIN_LON, MAX_LON = -180.0, 180.0

BASE32_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
BASE32_TABLE: Mapping[str, int] = MappingProxyType(
    {c: i for i, c in enumerate(BASE32_ALPHABET)}
)

# Expected positional error in meters, indexed by geohash length.
# Lengths past the end of the table resolve below a millimeter.
GEOHASH_ACCURACY_M: tuple[float, ...] = (
    math.inf,
    25_000_000.0,
    630_000.0,
    78_000.0,
    20_000.0,
    2_400.0,
    610.0,
    76.0,
    19.0,
    2.4,
    0.6,
    0.0074,
    0.0,
)
MAX_GEOHASH_LENGTH = len(GEOHASH_ACCURACY_M) - 1


@dataclasses.dataclass(frozen=True, slots=True)
class GeodeticConstants:
    earth_radius_m: float = EARTH_RADIUS_METERS
    radians_per_degree: float = RADIANS_PER_DEGREE
    meters_per_degree: float = METERS_PER_DEGREE
    min_lat: float = MIN_LAT
    max_lat: float = MAX_LAT
    min_lon: float = MIN_LON
    max_lon: float = MAX_LON
    base32_alphabet: str = BASE32_ALPHABET
    # mappingproxy is unhashable before 3.12, so it cannot be a plain default.
    base32_table: Mapping[str, int] = dataclasses.field(
        default_factory=lambda: BASE32_TABLE
    )
    geohash_accuracy_m: tuple[float, ...] = GEOHASH_ACCURACY_M


GEODETIC = GeodeticConstants()
