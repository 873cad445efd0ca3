"""Observability configuration using Logfire.

Services open one span per operation and log outcomes inside it:

    with logfire.span("invite_service.redeem_invite", token=token.redacted):
        ...
        logfire.info("Invite redeemed", chest_id=str(chest_id))

Invite tokens only ever appear as their 8-character prefix.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hoard.config import SERVICE_NAME, SERVICE_VERSION, ObservabilitySettings, Settings

# Route parameters that carry the caller's JWT
CREDENTIAL_PARAMS = frozenset({"auth_token", "authorization"})

# Polled by the load balancer; tracing it only adds noise
UNTRACED_URLS = "/health"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry goes to Logfire cloud.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise a token
    being configured means yes.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
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
        send_to_logfire=send_to_logfire,
    )


def _scrub_credentials(request, attributes: dict) -> dict:
    """Drop credential parameters from the attributes recorded for a request."""
    values = {
        name: value
        for name, value in attributes.get("values", {}).items()
        if name not in CREDENTIAL_PARAMS
    }
    return {**attributes, "values": values, "path": request.url.path}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Neither headers nor the credential parameters of a route are recorded.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_scrub_credentials,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the SQL a request runs, with the span context in SQL comments.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
