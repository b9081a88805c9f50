"""Filesystem-backed key-value service.

Each key is kept in its own ``<key>.json`` file under a root directory.
Each write goes through its own temporary file and an atomic rename, so
readers only ever see a complete record.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from ..errors import ParseError, StorageUnavailable
from .base import KeyValueStore

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileKeyValueStore(KeyValueStore):
    """Stores every key as a UTF-8 text file."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    async def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return await asyncio.to_thread(self._read, path)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise StorageUnavailable(key, "get", str(exc)) from exc

    async def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            await asyncio.to_thread(self._write, path, value)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            raise StorageUnavailable(key, "set", str(exc)) from exc

    async def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as exc:
            logger.error("Failed to delete %s: %s", path, exc)
            raise StorageUnavailable(key, "delete", str(exc)) from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key in (".", ".."):
            raise ValueError(f"Unsupported storage key: {key!r}")
        return self.root / f"{key}.json"

    @staticmethod
    def _read(path: Path) -> Optional[str]:
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as handle:
            return handle.read()

    @staticmethod
    def _write(path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Each write gets its own temp file
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
