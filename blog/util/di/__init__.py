"""Dependency injection wiring.

``PROVIDERS`` lists provider classes in build order. An entry with no
subclasses is used as-is; an entry with subclasses is a swappable component
whose production and mock variants are told apart by ``__is_mock__``.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Raises:
        ValueError: If a swappable component lacks the requested variant
    """
    variants = {
        bool(getattr(cls, "__is_mock__", False)): cls for cls in base.__subclasses__()
    }
    if not variants:
        return base

    try:
        return variants[use_mock]
    except KeyError:
        component = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(
            f"{component} has no {'mock' if use_mock else 'production'} provider"
        ) from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
