#!/usr/bin/env python3
"""Serve the third-party login API under uvicorn.

Logfire is configured before the app module is imported so that a failure
while building the app (bad settings, unreachable provider config) is
recorded too.
"""

import sys

import logfire
import uvicorn

from thirdlogin.config import Settings
from thirdlogin.util.observability import configure_logfire

APP_PATH = "thirdlogin.interface.api.app:app"


def serve(settings: Settings) -> None:
    """Run uvicorn in the foreground until it exits."""
    uvicorn.run(
        APP_PATH,
        host="0.0.0.0",
        port=settings.port,
        log_level="debug" if settings.debug else "info",
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span(
        "start_app",
        environment=settings.environment,
        identity_provider=settings.auth.provider,
        port=settings.port,
    ):
        try:
            serve(settings)
        except Exception:
            logfire.exception("API process exited with an error")
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
