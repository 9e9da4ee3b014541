"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests can swap for in-memory versions
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for the tenancy providers.

    A concrete provider subclasses this directly. A swappable component
    declares an abstract provider with ``__mock_component__`` set, then one
    production and one mock subclass; ``get_provider`` picks between them.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is the test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
