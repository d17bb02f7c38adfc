"""Dependency injection module."""

from typing import Mapping, Type

from adages.util.di.application import ProdApplicationProvider
from adages.util.di.base import Component, ProviderBase
from adages.util.di.core import ProdConfigProvider
from adages.util.di.domain import ProdDomainProvider
from adages.util.di.infrastructure import (
    MemoryPersistenceProvider,
    PersistenceProvider,
    PostgresPersistenceProvider,
)
from adages.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not swappable)
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (one variant chosen per container)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], variant: str | None = None
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Swappable component, select by __variant__

    Args:
        base: Provider base class
        variant: Implementation wanted for a swappable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__variant__", None) == variant),
        None,
    )

    if not impl:
        component_name = getattr(base, "__component__", None) or base.__name__
        available = sorted(str(c.__variant__) for c in subclasses)
        raise DependencyInjectionError(
            f"No '{variant}' implementation for {component_name} "
            f"(available: {', '.join(available)})"
        )

    return impl


def build_providers(
    variants: Mapping[Component, str], config: ProdConfigProvider
) -> list[ProviderBase]:
    """Instantiate the config provider plus one provider per PROVIDERS entry.

    Args:
        variants: Chosen implementation per swappable component
        config: Config provider instance

    Returns:
        Provider instances ready for ``make_async_container``
    """
    providers: list[ProviderBase] = [config]
    for base in PROVIDERS:
        component = getattr(base, "__component__", None)
        variant = variants.get(component) if component else None
        providers.append(get_provider(base, variant)())
    return providers


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "MemoryPersistenceProvider",
    "PostgresPersistenceProvider",
]
