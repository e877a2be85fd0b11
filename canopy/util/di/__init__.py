"""Dependency injection module."""

from typing import Type

from canopy.util.di.application import ProdApplicationProvider
from canopy.util.di.base import Component, ProviderBase
from canopy.util.di.core import ProdConfigProvider
from canopy.util.di.domain import ProdDomainProvider
from canopy.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Concrete providers are used as-is; component bases are resolved per environment
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    A provider without subclasses is concrete and returned unchanged. A
    component base is swapped for the subclass whose ``__is_mock__`` flag
    matches ``use_mock``.

    Raises:
        ValueError: If the component has no matching implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
