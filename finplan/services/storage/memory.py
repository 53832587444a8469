"""In-memory storage, used by tests and the `memory` backend."""

import json
from typing import Any, Optional

from finplan.services.storage.interface import (
    PersistenceReadError,
    StateStorageInterface,
)


class InMemoryStorage(StateStorageInterface):
    """
    Holds the ledger as serialized JSON text.

    Serializing on every save keeps the same round-trip guarantees as the
    file backend, and stops callers from mutating what was saved.
    """

    def __init__(self, initial_text: Optional[str] = None):
        self._text = initial_text
        self.save_count = 0

    def load(self) -> Optional[Any]:
        if self._text is None:
            return None
        try:
            return json.loads(self._text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise PersistenceReadError(f"Corrupt JSON in memory store: {e}") from e

    def save(self, raw: dict) -> None:
        self._text = json.dumps(raw, ensure_ascii=False)
        self.save_count += 1

    @property
    def text(self) -> Optional[str]:
        """The raw stored text, for inspection."""
        return self._text
