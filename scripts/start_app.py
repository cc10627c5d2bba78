#!/usr/bin/env python3
"""Serve the blog API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then run the app factory under uvicorn."""
    settings = Settings()

    # Configured before the app is built so startup errors are captured
    configure_logfire(settings)

    logfire.info(
        "Starting blog API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )

    try:
        uvicorn.run(
            "blog.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
