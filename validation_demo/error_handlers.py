from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("validation_demo.errors")


def _error_body(status_code: int) -> str:
    if status_code == 400:
        return "Invalid form data"
    if status_code == 404:
        return "Not found"
    if status_code == 405:
        return "Method not allowed"
    if status_code == 413:
        return "Request too large"
    if status_code >= 500:
        return "Internal server error"
    return "Request failed"


def register_error_handlers(app: FastAPI) -> None:
    """Transport errors are bare plain-text responses, never the form page."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("path=%s status=%s detail=%s", request.url.path, exc.status_code, exc.detail)
        return PlainTextResponse(
            _error_body(exc.status_code),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse(_error_body(500), status_code=500)
