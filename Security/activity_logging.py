"""
ACTIVITY TRACKING
=================
Structured request logging for monitoring.

FLOW:
- Middleware logs each request with method, path, status and request id.
- Added to the middleware stack by Security.security_integration.

WHY:
- Provides traceability for the demo endpoints, including rejected submissions.

HOW:
- Writes structured request logs to <LOG_DIR>/security.log.
"""

from __future__ import annotations

import hashlib
import logging
import os
from logging.handlers import RotatingFileHandler

from starlette.middleware.base import BaseHTTPMiddleware
from Security.secrets_redaction import redact

LOG_FILE_NAME = "security.log"


def _get_logger(log_dir: str) -> logging.Logger:
    # One child of security.activity per log file, so apps built with
    # different LOG_DIR values never share a handler.
    path = os.path.abspath(os.path.join(log_dir, LOG_FILE_NAME))
    suffix = hashlib.sha1(path.encode("utf-8")).hexdigest()[:12]
    logger = logging.getLogger("security.activity").getChild(suffix)
    if logger.handlers:
        return logger

    os.makedirs(os.path.dirname(path), exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=2_000_000, backupCount=3)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    return logger


class ActivityLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, log_dir: str = "logs", redact_secrets: bool = True):
        super().__init__(app)
        self.logger = _get_logger(log_dir)
        self.redact_secrets = redact_secrets

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        request_id = getattr(request.state, "request_id", None)
        query = request.url.query
        if query:
            query = redact(query, self.redact_secrets)
        self.logger.info(
            "method=%s path=%s query=%s status=%s request_id=%s ip=%s",
            request.method,
            request.url.path,
            query or "",
            response.status_code,
            request_id or "",
            request.client.host if request.client else "unknown",
        )
        return response
