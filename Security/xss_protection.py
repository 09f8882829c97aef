"""
XSS PROTECTION
==============
Security headers and CSP for mitigating cross-site scripting.
"""

# FLOW:
# - Middleware applies CSP and XSS-related headers to responses.
# WHY:
# - Second line behind template escaping; the /hello endpoint echoes raw markup.
# HOW:
# - Applies CSP and restrictive headers on every response without touching bodies.

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware


CONTENT_SECURITY_POLICY = (
    "default-src 'self'; "
    "script-src 'self'; "
    "style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data:; "
    "form-action 'self'; "
    "frame-ancestors 'self'"
)


class XSSProtectionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
        return response
