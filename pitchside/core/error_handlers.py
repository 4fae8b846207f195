"""Centralized exception handlers for the Pitchside service.

Every failure leaves the API as ``{"detail": "<message>"}``; domain failures
also carry ``"error": "<kind>"`` so clients can branch without parsing text.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pitchside.core.exceptions import PitchsideError

logger = logging.getLogger(__name__)


def _flatten_detail(detail: Any) -> str:
    """Convert arbitrary exception detail payloads into a string message."""
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict):
        nested = detail.get("detail")
        if isinstance(nested, str):
            return nested
        return "; ".join(f"{key}: {value}" for key, value in detail.items())
    if isinstance(detail, Iterable) and not isinstance(detail, (bytes, bytearray)):
        return "; ".join(_flatten_detail(item) for item in detail)
    if detail is None:
        return "An error occurred"
    return str(detail)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = [str(loc) for loc in error.get("loc", []) if loc != "body"]
        message = error.get("msg", "Invalid input")
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(messages) if messages else "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register FastAPI exception handlers that return a normalized JSON payload."""

    @app.exception_handler(PitchsideError)
    async def domain_exception_handler(request: Request, exc: PitchsideError):  # type: ignore[override]
        logger.info(
            "%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.detail
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": _flatten_detail(exc.detail), "error": exc.code},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):  # type: ignore[override]
        detail = _flatten_detail(exc.detail)
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        return JSONResponse(status_code=422, content={"detail": _format_validation_errors(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


__all__ = ["register_exception_handlers"]
