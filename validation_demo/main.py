from __future__ import annotations

import logging
import sys
from types import MappingProxyType
from typing import Any, Mapping

import uvicorn
from fastapi import FastAPI

from Security.security_config import SECURITY_SETTINGS
from Security.security_integration import apply_middlewares

from .app_context import templates
from .error_handlers import register_error_handlers
from .page_routes import register_page_routes
from .validation_routes import router as validation_router

logger = logging.getLogger("validation_demo.server")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(settings: Mapping[str, Any] | None = None) -> FastAPI:
    settings = MappingProxyType(dict(SECURITY_SETTINGS if settings is None else settings))

    # Paths are matched exactly: no slash redirects, no generated docs pages.
    app = FastAPI(
        title="Input Validation Demo",
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.templates = templates

    register_page_routes(app)
    app.include_router(validation_router)
    register_error_handlers(app)
    apply_middlewares(app, settings)
    return app


app = create_app()


def main() -> None:
    settings = SECURITY_SETTINGS
    configure_logging(settings["LOG_LEVEL"])
    host = settings["APP_HOST"]
    port = settings["APP_PORT"]

    logger.info("Starting server on port %s", port)
    config = uvicorn.Config(app, host=host, port=port, log_level=settings["LOG_LEVEL"].lower())
    server = uvicorn.Server(config)
    server.run()
    # uvicorn exits on its own for most bind errors; this covers the rest.
    if not server.started:
        logger.critical("Server failed to start on %s:%s", host, port)
        sys.exit(1)


if __name__ == "__main__":
    main()
