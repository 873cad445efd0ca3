"""Test doubles for swappable DI components.

Importing this package registers the mock providers with their bases.
"""

from .persistence import InMemoryPersistenceProvider
from .container import build_test_container

__all__ = ["InMemoryPersistenceProvider", "build_test_container"]
