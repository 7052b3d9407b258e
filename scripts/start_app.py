#!/usr/bin/env python3
"""Start the API server, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from qanda.config import Settings
from qanda.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the application."""
    settings = Settings()

    # Before the app is imported, so startup errors are captured
    configure_logfire(settings)

    try:
        logfire.info("Starting API server", host=settings.host, port=settings.port)
        uvicorn.run(
            "qanda.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
