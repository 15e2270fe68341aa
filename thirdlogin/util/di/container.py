"""Production DI container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider
import logfire

from thirdlogin.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container, wired for FastAPI requests.

    Every mockable component (identity, cache, storage, notification,
    persistence) resolves to its production implementation. Settings are
    read from the environment when first requested.

    Returns:
        Container to hand to ``setup_dishka``
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    logfire.info(
        "DI container built",
        providers=[type(p).__name__ for p in providers],
    )
    return make_async_container(*providers, FastapiProvider())
