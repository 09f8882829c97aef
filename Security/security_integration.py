"""
SECURITY INTEGRATION
====================
Wires the security middlewares into the FastAPI application.

Order matters: Starlette runs the last added middleware first, so the
request id is assigned before activity logging reads it and the body
size check runs before any handler parses a form.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from Security.activity_logging import ActivityLoggingMiddleware
from Security.headers_hardening import HeadersHardeningMiddleware
from Security.input_length_limits import DEFAULT_MAX_BODY_BYTES, MaxBodySizeMiddleware
from Security.request_id import RequestIdMiddleware
from Security.xss_protection import XSSProtectionMiddleware

logger = logging.getLogger("security")


def apply_middlewares(app, settings: Mapping[str, Any]) -> None:
    """Apply the security middlewares to the app in the correct order."""
    headers_enabled = settings.get("SECURITY_HEADERS_ENABLED", True)
    if headers_enabled:
        app.add_middleware(HeadersHardeningMiddleware)
        app.add_middleware(XSSProtectionMiddleware)

    app.add_middleware(MaxBodySizeMiddleware, max_bytes=settings.get("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES))

    activity_enabled = settings.get("ACTIVITY_LOGGING_ENABLED", True)
    if activity_enabled:
        app.add_middleware(
            ActivityLoggingMiddleware,
            log_dir=settings.get("LOG_DIR", "logs"),
            redact_secrets=settings.get("SECRETS_REDACTION_ENABLED", True),
        )

    # Outermost, so every other layer sees request.state.request_id.
    app.add_middleware(RequestIdMiddleware)

    logger.info(
        "Security configuration: headers=%s activity_logging=%s max_body_bytes=%s",
        headers_enabled,
        activity_enabled,
        settings.get("MAX_BODY_BYTES"),
    )
