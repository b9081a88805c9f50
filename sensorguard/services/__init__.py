"""Business logic services."""

from .registry import Registry, create_store

__all__ = ["Registry", "create_store"]
