"""Exception hierarchy raised by the registry layer."""

from __future__ import annotations

from typing import Iterable, List, Optional


class RegistryError(Exception):
    """Base class for all registry failures."""


class ParseError(RegistryError):
    """A persisted record could not be decoded.

    Never leaves the stores: it is caught and treated as missing data.
    """


class ValidationError(RegistryError, ValueError):
    """Caller-supplied data violates a data-model invariant."""

    def __init__(self, reasons: Iterable[str] | str) -> None:
        if isinstance(reasons, str):
            reasons = [reasons]
        self.reasons: List[str] = list(reasons) or ["Invalid input"]
        super().__init__("; ".join(self.reasons))


class StorageUnavailable(RegistryError, RuntimeError):
    """The underlying key-value service failed to read or write a record."""

    def __init__(self, key: str, operation: str, detail: Optional[str] = None) -> None:
        self.key = key
        self.operation = operation
        message = f"Storage {operation} failed for key {key!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
