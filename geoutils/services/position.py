from __future__ import annotations

import logging
from typing import Any

import httpx

from geoutils.core.settings import get_settings
from geoutils.models import Coordinate, Position
from geoutils.services.accuracy import geohash_length_for_coordinate
from geoutils.utils.coords import is_number, is_valid_coordinate
from geoutils.utils.geohash import encode_coordinate


logger = logging.getLogger(__name__)


class PositionProviderError(Exception):
    # Same numbering as the W3C GeolocationPositionError codes.
    code = 2


class PositionPermissionDeniedError(PositionProviderError):
    code = 1


class PositionUnavailableError(PositionProviderError):
    code = 2


class PositionTimeoutError(PositionProviderError):
    code = 3


def _optional_number(payload: dict[str, Any], key: str) -> float | None:
    value = payload.get(key)
    if value is None:
        return None
    if not is_number(value):
        raise PositionUnavailableError(f"Position provider returned invalid {key}")
    return float(value)


def position_from_payload(data: Any) -> Position:
    """Build a Position from ``{"coords": {...}, "timestamp": ...}``."""

    if not isinstance(data, dict):
        raise PositionUnavailableError("Position provider response is not an object")
    coords = data.get("coords")
    if not isinstance(coords, dict):
        raise PositionUnavailableError("Position provider response missing coords")

    latitude = coords.get("latitude")
    longitude = coords.get("longitude")
    if not is_valid_coordinate(latitude, longitude):
        raise PositionUnavailableError(
            "Position provider returned invalid latitude/longitude"
        )

    return Position(
        coords=Coordinate(
            latitude=float(latitude),
            longitude=float(longitude),
            altitude=_optional_number(coords, "altitude"),
            accuracy=_optional_number(coords, "accuracy"),
        ),
        timestamp=_optional_number(data, "timestamp"),
    )


class PositionClient:
    """Single-shot client for an HTTP position provider.

    Every ``request`` issues exactly one GET; there is no retry and no
    de-duplication of concurrent calls. Options are forwarded unchanged.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_s: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout_s
        self._client = http_client

    async def request(
        self,
        *,
        enable_high_accuracy: bool = False,
        maximum_age: float = 0,
        timeout_s: float | None = None,
    ) -> Position:
        timeout = timeout_s if timeout_s is not None else self._timeout
        params = {
            "enableHighAccuracy": "true" if enable_high_accuracy else "false",
            "maximumAge": maximum_age,
        }

        close_client = False
        client = self._client
        if client is None:
            close_client = True
            # Waits indefinitely unless a timeout is configured.
            client = httpx.AsyncClient(timeout=None)

        logger.debug(
            "Requesting position (url=%s high_accuracy=%s maximum_age=%s timeout=%s)",
            self._base_url,
            enable_high_accuracy,
            maximum_age,
            timeout,
        )
        # An injected client keeps its own timeout unless one is given here.
        extra: dict[str, Any] = {} if timeout is None else {"timeout": timeout}
        try:
            try:
                resp = await client.get(self._base_url, params=params, **extra)
            except httpx.TimeoutException as e:
                logger.warning("Position request timed out (url=%s)", self._base_url)
                raise PositionTimeoutError("Position request timed out") from e
            except httpx.HTTPError as e:
                logger.warning("Position request failed (url=%s)", self._base_url)
                raise PositionUnavailableError("Position request failed") from e

            if resp.status_code in (401, 403):
                raise PositionPermissionDeniedError(
                    f"Position provider denied access: {resp.status_code}"
                )
            if resp.status_code == 408:
                raise PositionTimeoutError("Position provider timed out")
            if not resp.is_success:
                logger.warning(
                    "Position provider error (url=%s status=%s)",
                    self._base_url,
                    resp.status_code,
                )
                raise PositionUnavailableError(
                    f"Position provider error: {resp.status_code}"
                )

            try:
                data = resp.json()
            except ValueError as e:
                raise PositionUnavailableError(
                    "Position provider returned invalid JSON"
                ) from e
            return position_from_payload(data)
        finally:
            if close_client:
                await client.aclose()


def _client_from_settings(http_client: httpx.AsyncClient | None) -> PositionClient:
    settings = get_settings()
    if not settings.position_provider_url:
        raise PositionUnavailableError("No position provider configured")
    return PositionClient(
        base_url=settings.position_provider_url,
        timeout_s=settings.position_timeout_s,
        http_client=http_client,
    )


async def get_current_position(
    *,
    enable_high_accuracy: bool = False,
    maximum_age: float = 0,
    timeout_s: float | None = None,
    client: PositionClient | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Position:
    if client is None:
        client = _client_from_settings(http_client)
    return await client.request(
        enable_high_accuracy=enable_high_accuracy,
        maximum_age=maximum_age,
        timeout_s=timeout_s,
    )


async def get_current_position_hash(
    *,
    enable_high_accuracy: bool = False,
    maximum_age: float = 0,
    timeout_s: float | None = None,
    client: PositionClient | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Geohash of the current position, as long as its accuracy warrants."""

    position = await get_current_position(
        enable_high_accuracy=enable_high_accuracy,
        maximum_age=maximum_age,
        timeout_s=timeout_s,
        client=client,
        http_client=http_client,
    )
    return encode_coordinate(
        position.coords, geohash_length_for_coordinate(position.coords)
    )
