"""Abstract base class for key-value persistence services."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Asynchronous string-keyed persistence service supplied by the host.

    I/O failures are reported as OSError or StorageUnavailable. A stored
    value that cannot be decoded to text is reported as ParseError.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: Record key

        Returns:
            The stored string, or None if the key has never been written
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Replace the value stored under a key.

        Args:
            key: Record key
            value: Complete serialized document
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Deleting a missing key is not an error."""
        pass
