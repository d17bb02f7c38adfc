"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers with unified metadata.

    Attributes:
        __component__: Component name (for swappable components, None for
            concrete providers)
        __variant__: Which implementation of the component this provider is
    """

    __component__: ClassVar[Component | None] = None
    __variant__: ClassVar[str | None] = None
