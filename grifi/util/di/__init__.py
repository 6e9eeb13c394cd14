"""Dependency injection wiring.

Every provider in PROVIDERS is either concrete (no subclasses) or a
mockable component base whose subclasses are the production and mock
implementations, told apart by ``__is_mock__``.
"""

from typing import Type

from grifi.util.di.adapter import ProdAdapterProvider
from grifi.util.di.application import ProdApplicationProvider
from grifi.util.di.base import Component, ProviderBase
from grifi.util.di.core import ProdConfigProvider
from grifi.util.di.domain import ProdDomainProvider
from grifi.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdAdapterProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {
        getattr(subclass, "__is_mock__", False): subclass
        for subclass in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = base.__mock_component__ or base.__name__
        raise ValueError(f"{component} has no {kind} provider") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdAdapterProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
