"""
SECURITY CONFIG
===============
Centralized settings loaded from environment.
"""

# FLOW:
# - Read env vars once and expose SECURITY_SETTINGS.
# WHY:
# - Centralizes server and hardening tuning per environment.
# HOW:
# - Loads an optional .env file, then reads env vars into a dict.

from __future__ import annotations

import os
import logging
import dotenv


def get_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() == "true"


def get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_str(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def _env_path() -> str:
    explicit = os.getenv("APP_ENV_FILE", "").strip()
    if explicit:
        return explicit
    root = os.path.dirname(os.path.dirname(__file__))
    return os.path.join(root, ".env")


def load_settings() -> dict:
    """Build a fresh settings mapping from the current environment."""
    return {
        "APP_HOST": get_str("APP_HOST", "0.0.0.0"),
        "APP_PORT": get_int("APP_PORT", 8080),
        "LOG_DIR": get_str("LOG_DIR", "logs"),
        "LOG_LEVEL": get_str("LOG_LEVEL", "INFO").upper(),
        "ACTIVITY_LOGGING_ENABLED": get_bool("ACTIVITY_LOGGING_ENABLED", True),
        "MAX_BODY_BYTES": get_int("MAX_BODY_BYTES", 10 * 1024 * 1024),
        "SECURITY_HEADERS_ENABLED": get_bool("SECURITY_HEADERS_ENABLED", True),
        "SECRETS_REDACTION_ENABLED": get_bool("SECRETS_REDACTION_ENABLED", True),
    }


dotenv.load_dotenv(_env_path())

# Optional startup log
if os.getenv("APP_ENV_LOG", "false").lower() == "true":
    logger = logging.getLogger("security.env")
    logger.info("Active env file: %s", _env_path())

SECURITY_SETTINGS = load_settings()
