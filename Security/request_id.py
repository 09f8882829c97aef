"""
REQUEST ID
==========
Attach a unique request id for traceability.
"""

# FLOW:
# - Middleware sets/echoes x-request-id for every request.
# WHY:
# - Correlates activity log lines with validation log lines.
# HOW:
# - Reuses a well-formed client id, otherwise generates a UUID4.

from __future__ import annotations

import re
import uuid
from starlette.middleware.base import BaseHTTPMiddleware

_CLIENT_ID = re.compile(r"[A-Za-z0-9\-]{1,64}")


def resolve_request_id(header_value: str | None) -> str:
    if header_value and _CLIENT_ID.fullmatch(header_value):
        return header_value
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        request_id = resolve_request_id(request.headers.get("x-request-id"))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
