"""
Shared fixtures for the registry test suite.
"""

from typing import Optional

import pytest

from sensorguard.config import Settings
from sensorguard.data import DimensionProfileStore, SensorCollectionStore
from sensorguard.services import Registry
from sensorguard.storage import InMemoryKeyValueStore, KeyValueStore


class FailingKeyValueStore(KeyValueStore):
    """Substrate that raises on the operations listed in ``fail_on``."""

    def __init__(self, fail_on=("get", "set", "delete"), initial: Optional[dict] = None) -> None:
        self.fail_on = set(fail_on)
        self.values = dict(initial or {})
        self.set_calls = 0

    async def get(self, key):
        if "get" in self.fail_on:
            raise OSError("disk unavailable")
        return self.values.get(key)

    async def set(self, key, value):
        self.set_calls += 1
        if "set" in self.fail_on:
            raise OSError("disk full")
        self.values[key] = value

    async def delete(self, key):
        if "delete" in self.fail_on:
            raise OSError("disk unavailable")
        self.values.pop(key, None)


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def sensor_store(kv_store):
    return SensorCollectionStore(kv_store, "placed_sensors_v1")


@pytest.fixture
def profile_store(kv_store):
    return DimensionProfileStore(kv_store, "user_dimensions_v1")


@pytest.fixture
def test_settings(tmp_path):
    return Settings(storage_backend="file", data_root=tmp_path / "data")


@pytest.fixture
def registry(kv_store, test_settings):
    return Registry(kv_store, test_settings)


@pytest.fixture
def failing_store():
    """Factory for substrates that raise on chosen operations."""
    return FailingKeyValueStore
