"""Mock providers for testing."""

from .persistence import MockPersistenceProvider, SharedInMemoryPersistenceProvider
from .container import build_api_container, build_test_container

__all__ = [
    "MockPersistenceProvider",
    "SharedInMemoryPersistenceProvider",
    "build_api_container",
    "build_test_container",
]
