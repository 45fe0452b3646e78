"""Dependency injection module.

Providers come in two kinds:

- Concrete providers (config, domain services, use cases) have no
  subclasses and are always used as-is.
- Mockable components (persistence) have a production subclass and, in
  tests, a mock subclass flagged with ``__is_mock__ = True``. Mock
  subclasses register themselves simply by being imported.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have swappable implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock subclass of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    if base.__mock_component__ is None:
        return base

    impl = next(
        (
            c
            for c in base.__subclasses__()
            if getattr(c, "__is_mock__", False) == use_mock
        ),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
