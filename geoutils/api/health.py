from __future__ import annotations

from fastapi import APIRouter, Depends

from geoutils.core.settings import Settings, get_settings


router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    # The geometry endpoints are pure; only position lookups need a provider.
    return {
        "status": "ready",
        "position_provider": bool(settings.position_provider_url),
    }
