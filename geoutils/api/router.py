from __future__ import annotations

from fastapi import APIRouter

from geoutils.api.distance import router as distance_router
from geoutils.api.geo_uri import router as geo_uri_router
from geoutils.api.geohash import router as geohash_router
from geoutils.api.health import router as health_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(geohash_router)
api_router.include_router(distance_router)
api_router.include_router(geo_uri_router)
