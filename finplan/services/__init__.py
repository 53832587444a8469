"""Services package."""

from finplan.services.storage import (
    InMemoryStorage,
    JsonFileStorage,
    PersistenceReadError,
    StateStorageInterface,
    StorageError,
)

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "PersistenceReadError",
    "StateStorageInterface",
    "StorageError",
]
