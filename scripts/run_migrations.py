#!/usr/bin/env python3
"""Apply Alembic migrations before the API starts.

Usage: ``run_migrations.py [REVISION]``; upgrades to ``head`` by default.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    # The database URL comes from Settings inside migrations/env.py
    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception:
            logfire.error(
                "Migration to {revision} failed",
                revision=revision,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Schema is at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
