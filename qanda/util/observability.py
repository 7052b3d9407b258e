"""Logfire setup and instrumentation.

Application code logs through logfire directly:

    logfire.info("Vote cast", voter_id=voter_id, target=str(target))

    with logfire.span("cast_vote", voter_id=voter_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qanda.config import ObservabilitySettings, Settings

# Load balancer health checks would otherwise drown out real traffic
UNTRACED_URLS = ["/health"]


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit setting wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created."""
    send = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name="qanda-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests, except health checks."""
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
