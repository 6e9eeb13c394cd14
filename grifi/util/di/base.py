"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider carrying mock-selection metadata.

    Attributes:
        __mock_component__: Name used in ``unmock={...}``; None when the
            provider is concrete
        __is_mock__: Set on the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
