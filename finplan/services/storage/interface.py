"""
Abstract Storage Interface

DESIGN DECISION: The engine only needs a key-value style load/save of the
whole ledger. This allows us to:
1. Keep the ledger in a JSON file today and somewhere else tomorrow
2. Use in-memory storage for testing
3. Keep business logic decoupled from storage implementation

The interface is intentionally tiny - whatever save() writes, load() must be
able to hand back as an equivalent structured value.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StateStorageInterface(ABC):
    """
    Abstract interface for ledger state persistence.

    Any storage implementation (JSON file, browser storage bridge, database)
    must implement these methods.
    """

    @abstractmethod
    def load(self) -> Optional[Any]:
        """
        Load the previously saved state.

        Returns:
            The decoded structured value, or None if nothing was ever saved

        Raises:
            PersistenceReadError: If saved data exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, raw: dict) -> None:
        """
        Overwrite the saved state with `raw`.

        Must be atomic: a reader never sees a partially written state.

        Raises:
            StorageError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class PersistenceReadError(StorageError):
    """Saved state exists but is malformed or unreadable."""
    pass
