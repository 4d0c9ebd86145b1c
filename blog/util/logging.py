"""Standard library logging setup.

Records from uvicorn, alembic and the database driver are forwarded to
Logfire so they appear next to the application's own spans.
"""

import logging

import logfire

from blog.config import Settings

# Third-party loggers that are only interesting when debugging
_NOISY_LOGGERS = ("asyncpg", "sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into Logfire. Call after ``configure_logfire``."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    quiet_level = logging.INFO if settings.debug else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger("blog").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )
