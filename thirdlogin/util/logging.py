"""Console logging for the API process."""

import logging
import sys

from thirdlogin.config import Settings

# Client libraries that log every request or pooled connection at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "redis", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for routes and third-party libraries.

    Services report through logfire; this covers the ``logging`` module
    users, which are the HTTP routes, uvicorn and client libraries.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQL echo is enabled on the engine in debug mode
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("thirdlogin").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s provider=%s",
        settings.environment,
        logging.getLevelName(level),
        settings.auth.provider,
    )
