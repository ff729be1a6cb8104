from __future__ import annotations

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from geoutils.models import Coordinate
from geoutils.services.geo_uri import (
    create_geo_uri,
    geo_uri_to_geohash,
    geohash_to_geo_uri,
    parse_geo_uri,
)


router = APIRouter(prefix="/v1/geo-uri", tags=["geo-uri"])


class GeoURICreateRequest(BaseModel):
    # Numeric strings are accepted and parsed before the range check.
    latitude: float | str
    longitude: float | str
    altitude: float | None = None
    accuracy: float | None = None

    zoom: int | None = None
    query: str | None = None
    type: str | None = None
    google_maps_compatible: bool = False
    extras: list[tuple[str, str]] = Field(default_factory=list)


class GeoURIResponse(BaseModel):
    uri: str


class CoordsOut(BaseModel):
    latitude: float
    longitude: float
    altitude: float | None
    accuracy: float | None


class ParamsOut(BaseModel):
    zoom: int | None
    query: str | None
    type: str | None
    extras: list[tuple[str, str]]


class GeoURIParseResponse(BaseModel):
    coords: CoordsOut
    params: ParamsOut


class GeoURIGeohashResponse(BaseModel):
    uri: str
    geohash: str


@router.post("", response_model=GeoURIResponse)
async def create(body: GeoURICreateRequest) -> GeoURIResponse:
    uri = create_geo_uri(
        body,
        zoom=body.zoom,
        query=body.query,
        type=body.type,
        google_maps_compatible=body.google_maps_compatible,
        extras=body.extras,
    )
    return GeoURIResponse(uri=uri)


@router.get("/parse", response_model=GeoURIParseResponse)
async def parse(uri: str = Query(min_length=1)) -> GeoURIParseResponse:
    parsed = parse_geo_uri(uri)
    coords: Coordinate = parsed.coords
    return GeoURIParseResponse(
        coords=CoordsOut(
            latitude=coords.latitude,
            longitude=coords.longitude,
            altitude=coords.altitude,
            accuracy=coords.accuracy,
        ),
        params=ParamsOut(
            zoom=parsed.params.zoom,
            query=parsed.params.query,
            type=parsed.params.type,
            extras=list(parsed.params.extras),
        ),
    )


@router.get("/geohash", response_model=GeoURIGeohashResponse)
async def to_geohash(uri: str = Query(min_length=1)) -> GeoURIGeohashResponse:
    return GeoURIGeohashResponse(uri=uri, geohash=geo_uri_to_geohash(uri))


@router.get("/from-geohash/{geohash}", response_model=GeoURIGeohashResponse)
async def from_geohash(
    geohash: str,
    zoom: int | None = Query(default=None, ge=1, le=21),
    google_maps_compatible: bool = False,
) -> GeoURIGeohashResponse:
    uri = geohash_to_geo_uri(
        geohash, zoom=zoom, google_maps_compatible=google_maps_compatible
    )
    return GeoURIGeohashResponse(uri=uri, geohash=geohash)
