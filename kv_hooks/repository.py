"""
Store repositories.

A repository owns the read and write of the whole store. Every call to
load() starts from what is persisted; nothing is cached between calls.
"""

import logging
from pathlib import Path
from typing import Protocol

from kv_hooks import codec
from kv_hooks.errors import StorePersistenceError
from kv_hooks.models import Store
from kv_hooks.paths import ensure_parent

logger = logging.getLogger(__name__)


class StoreRepository(Protocol):
    def load(self) -> Store: ...

    def save(self, store: Store) -> None: ...


class JsonFileRepository:
    """Store kept in a single JSON file."""

    def __init__(self, path: Path):
        """
        Initialize repository.

        Args:
            path: Store file, created on first load if missing
        """
        self.path = Path(path)

    def load(self) -> Store:
        """
        Read the whole store file.

        Returns:
            The decoded store, empty if the file is new or corrupt

        Raises:
            StorePersistenceError: The file cannot be created or read
        """
        ensure_parent(self.path)
        try:
            # Open for update so the file is created but never truncated
            with open(self.path, "a+b") as f:
                f.seek(0)
                contents = f.read()
        except OSError as e:
            raise StorePersistenceError(f"Error! Cannot read store {self.path}: {e}") from e

        logger.debug(f"Loaded {len(contents)} bytes from {self.path}")
        return codec.decode(contents)

    def save(self, store: Store) -> None:
        """
        Overwrite the store file with the given store.

        Raises:
            StorePersistenceError: The file cannot be written
        """
        try:
            data = codec.encode(store)
        except UnicodeEncodeError as e:
            raise StorePersistenceError(f"Error! Cannot encode store as UTF-8: {e}") from e

        try:
            with open(self.path, "wb") as f:
                f.write(data)
                f.flush()
        except OSError as e:
            raise StorePersistenceError(f"Error! Cannot write store {self.path}: {e}") from e

        logger.debug(f"Wrote {len(data)} bytes to {self.path}")


class MemoryRepository:
    """Store kept as encoded bytes in memory."""

    def __init__(self, data: bytes | None = None):
        self.data = data
        self.saves = 0

    def load(self) -> Store:
        return codec.decode(self.data)

    def save(self, store: Store) -> None:
        self.data = codec.encode(store)
        self.saves += 1
