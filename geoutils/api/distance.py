from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from geoutils.core.settings import Settings, get_settings
from geoutils.services.distance import get_distance


router = APIRouter(prefix="/v1/distance", tags=["distance"])


class PointIn(BaseModel):
    # WGS84 decimal degrees.
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class DistanceRequest(BaseModel):
    a: PointIn
    b: PointIn
    high_accuracy: bool = False


class DistanceResponse(BaseModel):
    distance_m: float
    high_accuracy: bool


class CheckLocationRequest(BaseModel):
    point: PointIn
    reference: PointIn
    # Falls back to settings.check_radius_m.
    radius_m: float | None = Field(default=None, gt=0)
    high_accuracy: bool = False


class CheckLocationResponse(BaseModel):
    within: bool
    distance_m: float
    radius_m: float


@router.post("", response_model=DistanceResponse)
async def distance(body: DistanceRequest) -> DistanceResponse:
    return DistanceResponse(
        distance_m=get_distance(body.a, body.b, high_accuracy=body.high_accuracy),
        high_accuracy=body.high_accuracy,
    )


@router.post("/check", response_model=CheckLocationResponse)
async def check(
    body: CheckLocationRequest,
    settings: Settings = Depends(get_settings),
) -> CheckLocationResponse:
    radius = body.radius_m if body.radius_m is not None else settings.check_radius_m
    # Same test as check_location, with the distance kept for the response.
    d = get_distance(body.reference, body.point, high_accuracy=body.high_accuracy)
    return CheckLocationResponse(within=d < radius, distance_m=d, radius_m=radius)
