from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from geoutils.api.router import api_router
from geoutils.core.errors import GeoInputError, make_error_payload
from geoutils.core.settings import get_settings


logger = logging.getLogger(__name__)


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Error envelope with the request's trace id in body and header."""

    trace_id = getattr(request.state, "trace_id", None)
    if trace_id:
        headers = {**(headers or {}), "X-Trace-Id": trace_id}
    return JSONResponse(
        status_code=status_code,
        headers=headers,
        content=make_error_payload(
            code=code, message=message, trace_id=trace_id, details=details
        ),
    )


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(title="geoutils API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_allow_origin],
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "X-Trace-Id"],
    )

    @app.middleware("http")
    async def _trace_id_middleware(request: Request, call_next):
        trace_id = request.headers.get("X-Trace-Id") or str(uuid.uuid4())
        request.state.trace_id = trace_id
        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response

    # Codec, Geo URI and coordinate errors: InvalidGeohashError ->
    # GEOHASH_INVALID, InvalidGeoURIError -> GEO_URI_INVALID,
    # CoordinateRangeError -> COORDINATE_OUT_OF_RANGE.
    @app.exception_handler(GeoInputError)
    async def _geo_input_error_handler(request: Request, exc: GeoInputError):
        logger.info(
            "Rejected input (code=%s path=%s): %s",
            exc.code,
            request.url.path,
            exc.message,
        )
        return _error_response(
            request,
            status_code=400,
            code=exc.code,
            message=exc.message,
            details=exc.details,
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(
            request,
            status_code=422,
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details=exc.errors(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(
            request,
            status_code=exc.status_code,
            code="HTTP_ERROR",
            message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception):
        trace_id = getattr(request.state, "trace_id", None)
        logger.error(
            "Unhandled exception (trace_id=%s method=%s path=%s)",
            trace_id,
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return _error_response(
            request,
            status_code=500,
            code="INTERNAL_ERROR",
            message="Internal error",
            headers={"X-Error-Path": f"{request.method} {request.url.path}"},
        )

    app.include_router(api_router)

    return app


app = create_app()
