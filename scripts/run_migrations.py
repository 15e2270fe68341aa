#!/usr/bin/env python3
"""Apply account table migrations before the API starts.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

from pathlib import Path
import sys

from alembic import command
from alembic.config import Config
import logfire

from thirdlogin.config import Settings
from thirdlogin.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the schema, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config(str(ALEMBIC_INI))

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A failed migration must keep the API from starting
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
