#!/usr/bin/env python3
"""Serve the comments API under uvicorn."""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app import so startup failures are traced
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Serving comments API on port {port}",
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "blog.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception:
        logfire.error("Comments API failed to start", _exc_info=sys.exc_info())
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
