"""
Storage Services Package

Provides the abstract persistence interface and its implementations.
The JSON file backend is the default; the in-memory one serves tests.
"""

from finplan.services.storage.interface import (
    PersistenceReadError,
    StateStorageInterface,
    StorageError,
)
from finplan.services.storage.json_file import JsonFileStorage
from finplan.services.storage.memory import InMemoryStorage

__all__ = [
    # Interface
    "StateStorageInterface",
    # Exceptions
    "PersistenceReadError",
    "StorageError",
    # Implementations
    "InMemoryStorage",
    "JsonFileStorage",
]
