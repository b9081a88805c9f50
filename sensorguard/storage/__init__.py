"""Key-value persistence services."""

from .base import KeyValueStore
from .file import FileKeyValueStore
from .memory import InMemoryKeyValueStore

__all__ = ["KeyValueStore", "FileKeyValueStore", "InMemoryKeyValueStore"]
