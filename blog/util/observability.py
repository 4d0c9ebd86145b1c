"""Logfire wiring for the comment service.

Services emit spans and events with ``logfire`` directly; this module only
configures the SDK and hooks it into FastAPI and the SQLAlchemy engine.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings

SERVICE_NAME = "blog-comments"

# Path parameters worth lifting onto the request span
_TRACED_PATH_PARAMS = ("post_id", "comment_id", "report_id", "user_id")


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire SDK from settings.

    Cloud export is on when OBSERVABILITY__SEND_TO_LOGFIRE says so, and
    otherwise whenever a token is configured. Console output is always on.
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["auth_token"]),
    )

    logfire.info(
        "Logfire configured for {service}",
        service=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    mapped = dict(attributes)
    path_params = getattr(request, "path_params", None) or {}
    for name in _TRACED_PATH_PARAMS:
        if name in path_params:
            mapped[name] = str(path_params[name])
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace each HTTP request, tagging spans with the ids in its path."""
    # Headers carry the auth cookie
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
