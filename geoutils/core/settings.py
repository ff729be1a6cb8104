from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOUTILS_",
        case_sensitive=False,
    )

    # Geohash length used when a caller does not ask for one.
    default_geohash_length: int = 4

    # Radius for "is nearby" checks, in meters.
    check_radius_m: float = 100_000.0

    # External position provider (single-shot JSON endpoint).
    position_provider_url: str | None = None
    # None means wait indefinitely.
    position_timeout_s: float | None = None

    # CORS (dev defaults)
    cors_allow_origin: str = "http://localhost:3000"
    cors_allow_credentials: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
