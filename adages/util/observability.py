"""Logfire setup for the statistics API.

Application code logs and traces through ``logfire`` directly:

    import logfire

    logfire.info("Stats assembled", user_id=str(user_id), popular=len(items))

    with logfire.span("engagement_service.fetch_votes"):
        ...

This module only configures the SDK and instruments FastAPI and the
SQLAlchemy engine.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from adages.config import Settings

SERVICE_NAME = "adages-backend"
SERVICE_VERSION = "0.1.0"

# Probed by the load balancer every few seconds
UNTRACED_PATHS = "/health"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Telemetry goes to the console always and to Logfire cloud when
    ``OBSERVABILITY__LOGFIRE_TOKEN`` is set (or
    ``OBSERVABILITY__SEND_TO_LOGFIRE=true``). Cookies and auth headers
    are scrubbed by Logfire's default patterns.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha
        if settings.git_sha != "unknown"
        else SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        persistence=settings.persistence.backend,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes}
        result["path"] = request.url.path
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        excluded_urls=UNTRACED_PATHS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
