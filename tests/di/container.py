"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Provider, make_async_container

from thirdlogin.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None, *extra: Provider
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables, like production.

    Args:
        unmock: Components to use production implementations for.
                All others use their mocks.
        *extra: Additional providers, e.g. ``FastapiProvider`` for route tests

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real Postgres, everything else mocked
        container = build_test_container(unmock={"persistence"})

        # Route tests
        container = build_test_container(set(), FastapiProvider())
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances: list[Provider] = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances, *extra)


def _mockable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject components that are not mockable.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are named
    """
    unknown = set(unmock) - _mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
