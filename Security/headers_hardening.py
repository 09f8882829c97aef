"""
HEADERS HARDENING
=================
Extra hardening headers.
"""

# FLOW:
# - Middleware adds cross-origin and permissions headers.
# WHY:
# - The demo page needs no browser features; deny them all.
# HOW:
# - Adds Permissions-Policy and COOP/CORP headers.

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware


PERMISSIONS_POLICY = "geolocation=(), microphone=(), camera=(), payment=()"


class HeadersHardeningMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Permissions-Policy", PERMISSIONS_POLICY)
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        response.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        return response
