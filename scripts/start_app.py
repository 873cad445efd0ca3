#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
errors raised while the app and its container are built are reported too.
"""

import sys

import logfire
import uvicorn

from hoard.config import Settings
from hoard.util.logging import setup_logging
from hoard.util.observability import configure_logfire


def main() -> int:
    """Start the server; startup failures are sent to Logfire and re-raised."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    behind_proxy = settings.environment in ("staging", "production")
    logfire.info(
        "Starting Hoard API",
        port=settings.port,
        environment=settings.environment,
        behind_proxy=behind_proxy,
    )

    try:
        uvicorn.run(
            "hoard.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            # Request spans already record every call
            access_log=settings.debug,
            # TLS ends at the load balancer; trust its X-Forwarded-* headers
            proxy_headers=behind_proxy,
            forwarded_allow_ips="*" if behind_proxy else None,
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
