"""Logfire setup for the API process and its database engine.

Services and use cases log through ``logfire`` directly:

    with logfire.span("post_service.generate_unique_slug", title=title):
        logfire.info("Slug collision", slug=candidate.root)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quill import __version__
from quill.config import Settings

# Load balancer probes would otherwise dominate the trace list
UNTRACED_URLS = "/api/health"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Reads ``OBSERVABILITY__LOGFIRE_TOKEN`` and ``OBSERVABILITY__SEND_TO_LOGFIRE``.
    Without a token everything stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="quill-api",
        service_version=__version__,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    result = {**attributes, "path": request.url.path}
    if request.client:
        result["client_host"] = request.client.host
    user_agent = request.headers.get("user-agent")
    if user_agent:
        result["user_agent"] = user_agent
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health probes."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
