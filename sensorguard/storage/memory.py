"""In-memory key-value service for development and testing."""

from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .base import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store that yields to the event loop on every call."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        await asyncio.sleep(0)
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Value for {key!r} must be a string, not {type(value).__name__}")
        await asyncio.sleep(0)
        self._values[key] = value

    async def delete(self, key: str) -> None:
        await asyncio.sleep(0)
        self._values.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of every stored key and value."""

        return dict(self._values)
