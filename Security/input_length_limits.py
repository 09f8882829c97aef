"""
INPUT LENGTH LIMITS
===================
Reject oversized payloads, declared or streamed.
"""

# FLOW:
# - Middleware rejects requests whose Content-Length exceeds max_bytes.
# - read_limited_body() counts streamed bytes for bodies without a length.
# WHY:
# - Bounds the form bodies the validation endpoints will read.
# HOW:
# - Header check before processing; running byte count while reading.

from __future__ import annotations

from fastapi import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


async def read_limited_body(request: Request, max_bytes: int = DEFAULT_MAX_BODY_BYTES) -> bytes:
    """Read the request body, raising 413 as soon as it passes max_bytes."""
    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > max_bytes:
            raise HTTPException(status_code=413, detail="Request too large")
        chunks.append(chunk)
    return b"".join(chunks)


class MaxBodySizeMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, max_bytes: int = DEFAULT_MAX_BODY_BYTES):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request, call_next):
        content_length = request.headers.get("content-length")
        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                return PlainTextResponse("Invalid form data", status_code=400)
            if size > self.max_bytes:
                return PlainTextResponse("Request too large", status_code=413)
        return await call_next(request)
