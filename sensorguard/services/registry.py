"""Registry facade over the sensor and profile stores."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import Settings, settings
from ..data import DimensionProfileStore, SensorCollectionStore
from ..storage import FileKeyValueStore, InMemoryKeyValueStore, KeyValueStore

logger = logging.getLogger(__name__)


def create_store(backend: str = "auto", data_root: Optional[Path] = None) -> KeyValueStore:
    """Build the key-value service named by ``backend``.

    Args:
        backend: 'memory', 'file', or 'auto' (resolves to 'file')
        data_root: Directory for the file backend

    Returns:
        A ready-to-use key-value service
    """
    if backend == "auto":
        backend = "file"

    if backend == "memory":
        logger.info("Using in-memory storage")
        return InMemoryKeyValueStore()
    if backend == "file":
        root = Path(data_root or settings.data_root)
        logger.info("Using file storage at %s", root)
        return FileKeyValueStore(root)
    raise ValueError(f"Unknown storage backend: {backend}")


class Registry:
    """Owns the sensor collection and dimension profile stores.

    Holds no domain state of its own; every call goes back to storage.
    """

    def __init__(self, store: KeyValueStore, config: Optional[Settings] = None) -> None:
        config = config or settings
        self._store = store
        self.sensors = SensorCollectionStore(store, config.sensors_key)
        self.profile = DimensionProfileStore(store, config.profile_key)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Registry":
        """Create a registry using the configured storage backend."""

        config = config or settings
        return cls(create_store(config.storage_backend, config.data_root), config)

    @property
    def store(self) -> KeyValueStore:
        """Return the underlying key-value service."""
        return self._store
