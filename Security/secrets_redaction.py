"""
SECRETS REDACTION
=================
Utility to mask secrets in logged query strings.
"""

# FLOW:
# - redact() walks key=value pairs and masks values of sensitive keys.
# WHY:
# - Query strings land in the activity log verbatim otherwise.
# HOW:
# - A key is sensitive when it contains one of SENSITIVE_KEY_PARTS.

from __future__ import annotations

import re

SENSITIVE_KEY_PARTS = ("password", "passwd", "token", "key", "secret")

_PAIR = re.compile(r"(?P<key>[^&=]*)=(?P<value>[^&]*)")


def _mask(match: re.Match) -> str:
    key = match.group("key")
    if any(part in key.lower() for part in SENSITIVE_KEY_PARTS):
        return f"{key}=***"
    return match.group(0)


def redact(value: str, enabled: bool = True) -> str:
    if not enabled:
        return value
    return _PAIR.sub(_mask, value)
