"""Logfire setup and library instrumentation.

Services emit events and spans straight through ``logfire``::

    with logfire.span("provisioning_service.provision", login=profile.login):
        logfire.info("Account provisioned", account_id=str(account_id))

Identifiers (provider, login, account id, uid) are fine to log. Session
tokens, provider access tokens, authorization codes and authcodes are not;
the scrubbing patterns below catch any that slip into attributes.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from thirdlogin.config import Settings

# Matched against attribute names in addition to logfire's defaults
# (which already cover token, secret, password and auth headers)
SCRUB_PATTERNS = ["authcode", "access_token"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Sending to Logfire cloud follows ``OBSERVABILITY__SEND_TO_LOGFIRE`` when
    set, otherwise the presence of ``OBSERVABILITY__LOGFIRE_TOKEN``. Without
    either, events only reach the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name="thirdlogin-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
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
        identity_provider=settings.auth.provider,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Drop parsed parameters: the callback carries codes and commerce tokens
    mapped = {key: value for key, value in attributes.items() if key != "values"}
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming requests without their query parameters or headers.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace provisioning and lookup queries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace provider, file service and push webhook calls."""
    logfire.instrument_httpx()


def instrument_redis() -> None:
    """Trace handshake and dedup cache commands.

    Command arguments are not captured; handshake values hold session tokens.
    """
    logfire.instrument_redis(capture_statement=False)
