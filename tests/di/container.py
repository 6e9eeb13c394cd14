"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Provider, make_async_container

from grifi.util.di import PROVIDERS, Component, PersistenceProvider, get_provider
from tests.di.persistence import SharedInMemoryPersistenceProvider


def build_test_container(
    unmock: set[Component] | None = None, *extra_providers: Provider
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        extra_providers: Additional providers, e.g. for API tests

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        provider_instances.append(provider_class())

    return make_async_container(*provider_instances, *extra_providers)


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Raises:
        ValueError: If unknown components
    """
    mockable_providers = [p for p in PROVIDERS if p.__subclasses__()]
    all_components = {
        getattr(p, "__mock_component__")
        for p in mockable_providers
        if hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")


def build_api_container(*extra_providers: Provider) -> AsyncContainer:
    """Build a container for API tests.

    Production providers everywhere except persistence, which is replaced
    by in-memory repositories shared across HTTP requests.
    """
    provider_instances = [
        get_provider(base, use_mock=False)()
        for base in PROVIDERS
        if base is not PersistenceProvider
    ]
    return make_async_container(
        *provider_instances,
        SharedInMemoryPersistenceProvider(),
        *extra_providers,
    )
