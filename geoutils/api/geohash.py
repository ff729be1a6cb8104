from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from geoutils.core.settings import Settings, get_settings
from geoutils.services.accuracy import (
    calculate_geohash_length,
    estimate_geohash_accuracy,
)
from geoutils.utils.geohash import decode_bbox, encode, geohash_to_bytes


router = APIRouter(prefix="/v1/geohash", tags=["geohash"])


class IntervalOut(BaseModel):
    min: float
    max: float


class BoundsOut(BaseModel):
    latitude: IntervalOut
    longitude: IntervalOut


class GeohashEncodeResponse(BaseModel):
    geohash: str


class GeohashDecodeResponse(BaseModel):
    geohash: str
    latitude: float
    longitude: float
    bounds: BoundsOut
    accuracy_m: float


class GeohashBytesResponse(BaseModel):
    geohash: str
    bytes: list[int]


class GeohashLengthResponse(BaseModel):
    meters: float
    length: int


@router.get("/encode", response_model=GeohashEncodeResponse)
async def encode_geohash(
    latitude: float = Query(ge=-90.0, le=90.0),
    longitude: float = Query(ge=-180.0, le=180.0),
    length: int | None = Query(default=None, ge=1, le=12),
    settings: Settings = Depends(get_settings),
) -> GeohashEncodeResponse:
    precision = length if length is not None else settings.default_geohash_length
    return GeohashEncodeResponse(
        geohash=encode(latitude, longitude, precision=precision)
    )


@router.get("/length", response_model=GeohashLengthResponse)
async def geohash_length(
    meters: float = Query(ge=0, allow_inf_nan=False),
) -> GeohashLengthResponse:
    return GeohashLengthResponse(
        meters=meters, length=int(calculate_geohash_length(meters))
    )


@router.get("/{geohash}", response_model=GeohashDecodeResponse)
async def decode_geohash(geohash: str) -> GeohashDecodeResponse:
    bbox = decode_bbox(geohash)
    latitude, longitude = bbox.center
    return GeohashDecodeResponse(
        geohash=geohash,
        latitude=latitude,
        longitude=longitude,
        bounds=BoundsOut(
            latitude=IntervalOut(min=bbox.latitude.min, max=bbox.latitude.max),
            longitude=IntervalOut(min=bbox.longitude.min, max=bbox.longitude.max),
        ),
        accuracy_m=estimate_geohash_accuracy(geohash),
    )


@router.get("/{geohash}/bytes", response_model=GeohashBytesResponse)
async def geohash_bytes(geohash: str) -> GeohashBytesResponse:
    return GeohashBytesResponse(geohash=geohash, bytes=list(geohash_to_bytes(geohash)))
