"""
Test Configuration

Provides an application built from test settings and a TestClient for it.
"""

import pytest
from fastapi.testclient import TestClient

from Security.security_config import load_settings
from validation_demo.main import create_app


@pytest.fixture
def log_dir(tmp_path):
    """Per-test log directory for the activity log."""
    return tmp_path / "logs"


@pytest.fixture
def settings(log_dir):
    """Default settings with logs redirected into the temporary directory."""
    values = load_settings()
    values["LOG_DIR"] = str(log_dir)
    values["ACTIVITY_LOGGING_ENABLED"] = True
    values["SECURITY_HEADERS_ENABLED"] = True
    values["SECRETS_REDACTION_ENABLED"] = True
    values["MAX_BODY_BYTES"] = 10 * 1024 * 1024
    return values


@pytest.fixture
def client(settings):
    """Create FastAPI test client."""
    return TestClient(create_app(settings))
