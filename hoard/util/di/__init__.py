"""Dependency injection wiring."""

from collections.abc import Collection

from hoard.util.di.application import ApplicationProvider
from hoard.util.di.base import COMPONENTS, Component, ProviderBase, resolve_provider
from hoard.util.di.core import ConfigProvider
from hoard.util.di.domain import DomainProvider
from hoard.util.di.persistence import PersistenceProvider, PostgresPersistenceProvider

# Every provider the app needs; swappable components are listed by their base
PROVIDERS: list[type[ProviderBase]] = [
    ConfigProvider,
    DomainProvider,
    ApplicationProvider,
    PersistenceProvider,
]


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate the providers for a container.

    Args:
        mocked: Components to back with their mock implementation

    Returns:
        Provider instances, ready for `make_async_container`

    Raises:
        ValueError: If an unknown component is named
    """
    unknown = set(mocked) - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
    return [resolve_provider(base, mocked)() for base in PROVIDERS]


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "resolve_provider",
    "ApplicationProvider",
    "ConfigProvider",
    "DomainProvider",
    "PersistenceProvider",
    "PostgresPersistenceProvider",
]
