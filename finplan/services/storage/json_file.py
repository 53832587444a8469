"""
JSON File Storage Implementation

DESIGN DECISION: A single JSON document on local disk is the default backend:
1. The whole ledger is small (a household's month of entries)
2. The file is human-readable and trivially backed up
3. Atomic replace gives all-or-nothing writes without a database

Writes go to a temporary file in the same directory, which is then renamed
over the target. Transient OS errors are retried before giving up.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from finplan.config import get_settings
from finplan.log import get_logger
from finplan.services.storage.interface import (
    PersistenceReadError,
    StateStorageInterface,
    StorageError,
)


class JsonFileStorage(StateStorageInterface):
    """Keeps the ledger as one JSON document on disk."""

    def __init__(
        self,
        path: Optional[Path] = None,
        max_attempts: Optional[int] = None,
    ):
        settings = get_settings().storage
        self._path = Path(path) if path is not None else settings.state_path
        self._max_attempts = max_attempts or settings.max_write_attempts
        self._logger = get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[Any]:
        if not self._path.exists():
            return None

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceReadError(f"Cannot read {self._path}: {e}") from e

        if not text.strip():
            return None

        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise PersistenceReadError(f"Corrupt JSON in {self._path}: {e}") from e

    def save(self, raw: dict) -> None:
        text = json.dumps(raw, ensure_ascii=False, indent=2)

        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
                retry=retry_if_exception_type(OSError),
                reraise=True,
            ):
                with attempt:
                    self._atomic_write(text)
        except OSError as e:
            raise StorageError(f"Failed to save ledger to {self._path}: {e}") from e

    def _atomic_write(self, text: str) -> None:
        """Write to a sibling temp file, then rename it over the target."""
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError:
            self._logger.warning("state_write_failed", path=str(self._path))
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
