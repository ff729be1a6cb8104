"""Geohash encode/decode.

Bits alternate between longitude and latitude, longitude first; every five
bits become one base32 symbol, most significant bit first.
"""

from __future__ import annotations

from typing import Any

from geoutils.core.constants import (
    BASE32_ALPHABET,
    BASE32_TABLE,
    MAX_LAT,
    MAX_LON,
    MIN_LAT,
    MIN_LON,
)
from geoutils.core.errors import InvalidGeohashError
from geoutils.models import BoundingBox, Coordinate, Interval

_MASKS = (16, 8, 4, 2, 1)


def encode(latitude: float, longitude: float, *, precision: int = 4) -> str:
    if precision <= 0:
        raise ValueError("precision must be > 0")

    lat_min, lat_max = MIN_LAT, MAX_LAT
    lon_min, lon_max = MIN_LON, MAX_LON

    bit = 0
    ch = 0
    even = True
    out: list[str] = []

    while len(out) < precision:
        if even:
            mid = (lon_min + lon_max) / 2.0
            if longitude > mid:
                ch |= _MASKS[bit]
                lon_min = mid
            else:
                lon_max = mid
        else:
            mid = (lat_min + lat_max) / 2.0
            if latitude > mid:
                ch |= _MASKS[bit]
                lat_min = mid
            else:
                lat_max = mid

        even = not even
        if bit < 4:
            bit += 1
            continue

        out.append(BASE32_ALPHABET[ch])
        bit = 0
        ch = 0

    return "".join(out)


def encode_coordinate(coord: Coordinate, precision: int = 4) -> str:
    return encode(coord.latitude, coord.longitude, precision=precision)


def _symbol_indexes(geohash: Any) -> list[int]:
    if not isinstance(geohash, str):
        raise TypeError(f"geohash must be a str, not {type(geohash).__name__}")
    if not geohash:
        raise InvalidGeohashError(
            "geohash must be non-empty", details={"geohash": geohash}
        )

    out: list[int] = []
    for c in geohash.lower():
        try:
            out.append(BASE32_TABLE[c])
        except KeyError as e:
            raise InvalidGeohashError(
                f"Invalid geohash character: {c!r}", details={"geohash": geohash}
            ) from e
    return out


def decode_bbox(geohash: str) -> BoundingBox:
    """Return the bounding box covered by ``geohash``."""

    lat_min, lat_max = MIN_LAT, MAX_LAT
    lon_min, lon_max = MIN_LON, MAX_LON
    even = True

    for cd in _symbol_indexes(geohash):
        for mask in _MASKS:
            if even:
                mid = (lon_min + lon_max) / 2.0
                if cd & mask:
                    lon_min = mid
                else:
                    lon_max = mid
            else:
                mid = (lat_min + lat_max) / 2.0
                if cd & mask:
                    lat_min = mid
                else:
                    lat_max = mid
            even = not even

    return BoundingBox(
        latitude=Interval(lat_min, lat_max),
        longitude=Interval(lon_min, lon_max),
    )


def decode_center(geohash: str) -> tuple[float, float]:
    return decode_bbox(geohash).center


def decode(geohash: str) -> Coordinate:
    latitude, longitude = decode_center(geohash)
    return Coordinate(latitude=latitude, longitude=longitude)


def geohash_to_bytes(geohash: str) -> bytes:
    """Alphabet index (0..31) of every character, for compact storage.

    The result is not a position; feed it back through the alphabet to get
    the geohash again.
    """

    return bytes(_symbol_indexes(geohash))
