"""
Error Handling Tests

Tests for transport-level error responses and unhandled exceptions.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from validation_demo.error_handlers import _error_body
from validation_demo.main import create_app


class TestErrorBodies:
    """Transport errors map to fixed plain-text bodies."""

    @pytest.mark.parametrize(
        "status_code, body",
        [
            (400, "Invalid form data"),
            (404, "Not found"),
            (405, "Method not allowed"),
            (413, "Request too large"),
            (418, "Request failed"),
            (500, "Internal server error"),
            (503, "Internal server error"),
        ],
    )
    def test_error_body(self, status_code, body):
        assert _error_body(status_code) == body


class TestUnhandledErrors:
    """Unexpected exceptions become a generic 500 without leaking details."""

    @pytest.fixture
    def failing_client(self, settings):
        app = create_app(settings)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("database password is hunter2")

        return TestClient(app, raise_server_exceptions=False)

    def test_returns_generic_500(self, failing_client):
        response = failing_client.get("/boom")

        assert response.status_code == 500
        assert response.text == "Internal server error"
        assert "hunter2" not in response.text

    def test_exception_is_logged(self, failing_client, caplog):
        with caplog.at_level(logging.ERROR, logger="validation_demo.errors"):
            failing_client.get("/boom")

        assert "Unhandled error on GET /boom" in caplog.text

    def test_transport_errors_are_not_rendered_in_page(self, client):
        response = client.get("/secure/input")

        assert "<html>" not in response.text
        assert "Error:" not in response.text
