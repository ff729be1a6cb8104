"""``geo:`` URI (RFC 5870) formatting and parsing.

    geo:<lat>,<lon>[,<alt>][;u=<accuracy>][?z=<zoom>&q=<query>&t=<type>&...]
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit

from geoutils.core.errors import InvalidGeoURIError
from geoutils.models import Coordinate, GeoURI, GeoURIParams
from geoutils.services.accuracy import (
    estimate_geohash_accuracy,
    geohash_length_for_coordinate,
)
from geoutils.utils.coords import (
    clamp,
    get_field,
    is_number,
    is_valid_coordinate,
    parse_coordinate,
)
from geoutils.utils.geohash import decode_center, encode


GEO_SCHEME = "geo"
MIN_ZOOM = 1
MAX_ZOOM = 21


def _format_number(value: float) -> str:
    # Positional notation only: 42.0 -> "42", 5e-05 -> "0.00005".
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if value == 0:
        return "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def create_geo_uri(
    coords: Any,
    *,
    zoom: int | None = None,
    query: str | None = None,
    type: str | None = None,
    google_maps_compatible: bool = False,
    extras: Iterable[tuple[str, Any]] = (),
) -> str:
    """Build a ``geo:`` URI string.

    Latitude/longitude may be numbers or numeric strings. Raises
    CoordinateRangeError when they cannot be parsed or are out of range.

    ``google_maps_compatible`` puts the coordinates in ``q`` in place of
    ``query``.
    """

    latitude, longitude = parse_coordinate(
        get_field(coords, "latitude"), get_field(coords, "longitude")
    )
    altitude = get_field(coords, "altitude")
    accuracy = get_field(coords, "accuracy")

    lat_s, lon_s = _format_number(latitude), _format_number(longitude)
    uri = f"{GEO_SCHEME}:{lat_s},{lon_s}"
    if is_number(altitude) and altitude > 0:
        uri += f",{_format_number(altitude)}"
    if is_number(accuracy) and accuracy >= 0:
        uri += f";u={_format_number(accuracy)}"

    params: list[tuple[str, str]] = []
    if (
        isinstance(zoom, int)
        and not isinstance(zoom, bool)
        and MIN_ZOOM <= zoom <= MAX_ZOOM
    ):
        params.append(("z", str(zoom)))
    if google_maps_compatible:
        params.append(("q", f"{lat_s},{lon_s}"))
    elif isinstance(query, str):
        params.append(("q", query))
    if isinstance(type, str):
        params.append(("t", type))
    params.extend((str(k), str(v)) for k, v in extras)

    if params:
        uri += "?" + urlencode(params)
    return uri


def _invalid(uri: str, message: str) -> InvalidGeoURIError:
    return InvalidGeoURIError(message, details={"uri": uri})


def _parse_float(uri: str, value: str, *, name: str) -> float:
    try:
        out = float(value)
    except ValueError as e:
        raise _invalid(uri, f"Invalid {name}: {value!r}") from e
    if not is_number(out):
        raise _invalid(uri, f"Invalid {name}: {value!r}")
    return out


def parse_geo_uri(uri: str) -> GeoURI:
    if not isinstance(uri, str):
        raise TypeError(f"Geo URI must be a str, not {type(uri).__name__}")

    try:
        parts = urlsplit(uri.strip())
    except ValueError as e:
        raise _invalid(uri, f"Invalid Geo URI: {uri!r}") from e

    if parts.scheme != GEO_SCHEME:
        raise _invalid(uri, f"Invalid protocol: {parts.scheme or '<none>'}:")
    if parts.netloc:
        raise _invalid(uri, "Geo URI must not have an authority")

    coords_part, *uri_params = parts.path.split(";")
    values = coords_part.split(",")
    if len(values) < 2 or len(values) > 3:
        raise _invalid(uri, f"Invalid Geo URI coordinates: {coords_part!r}")

    latitude = _parse_float(uri, values[0], name="latitude")
    longitude = _parse_float(uri, values[1], name="longitude")
    altitude: float | None = None
    if len(values) == 3:
        altitude = _parse_float(uri, values[2], name="altitude")
    if not is_valid_coordinate(latitude, longitude):
        raise _invalid(uri, f"Invalid latitude/longitude: {latitude}, {longitude}")

    accuracy: float | None = None
    extras: list[tuple[str, str]] = []
    for param in uri_params:
        key, _, value = param.partition("=")
        if key.lower() == "u":
            accuracy = _parse_float(uri, value, name="accuracy")
        else:
            extras.append((key, value))

    zoom: int | None = None
    query: str | None = None
    type_: str | None = None
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key == "z":
            try:
                zoom = int(clamp(MIN_ZOOM, int(value), MAX_ZOOM))
            except ValueError as e:
                raise _invalid(uri, f"Invalid zoom: {value!r}") from e
        elif key == "q":
            query = value
        elif key == "t":
            type_ = value
        else:
            extras.append((key, value))

    return GeoURI(
        coords=Coordinate(
            latitude=latitude,
            longitude=longitude,
            altitude=altitude,
            accuracy=accuracy,
        ),
        params=GeoURIParams(
            zoom=zoom, query=query, type=type_, extras=tuple(extras)
        ),
    )


def geohash_to_geo_uri(
    geohash: str,
    *,
    google_maps_compatible: bool = False,
    altitude: float | None = None,
    zoom: int | None = None,
) -> str:
    latitude, longitude = decode_center(geohash)
    coords = Coordinate(
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        accuracy=estimate_geohash_accuracy(geohash),
    )
    return create_geo_uri(
        coords, zoom=zoom, google_maps_compatible=google_maps_compatible
    )


def geo_uri_to_geohash(uri: str) -> str:
    """Geohash of the URI's point, as long as its ``u=`` accuracy warrants."""

    coords = parse_geo_uri(uri).coords
    return encode(
        coords.latitude,
        coords.longitude,
        precision=geohash_length_for_coordinate(coords),
    )
