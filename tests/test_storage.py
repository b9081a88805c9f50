import asyncio

import pytest

from sensorguard.data import DimensionProfileStore, SensorCollectionStore
from sensorguard.errors import ParseError, StorageUnavailable
from sensorguard.storage import FileKeyValueStore, InMemoryKeyValueStore

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_memory_store_get_set_delete():
    store = InMemoryKeyValueStore({"a": "1"})

    assert await store.get("a") == "1"
    assert await store.get("b") is None

    await store.set("b", "2")
    await store.delete("a")
    await store.delete("missing")

    assert store.snapshot() == {"b": "2"}


@pytest.mark.asyncio
async def test_memory_store_rejects_non_string_values():
    store = InMemoryKeyValueStore()

    with pytest.raises(TypeError):
        await store.set("a", b"bytes")


@pytest.mark.asyncio
async def test_file_store_round_trip(tmp_path):
    store = FileKeyValueStore(tmp_path / "kv")

    assert await store.get("placed_sensors_v1") is None
    await store.set("placed_sensors_v1", "[]")

    assert await store.get("placed_sensors_v1") == "[]"
    assert (tmp_path / "kv" / "placed_sensors_v1.json").read_text(encoding="utf-8") == "[]"
    assert list((tmp_path / "kv").glob("*.tmp")) == []

    await store.delete("placed_sensors_v1")
    assert await store.get("placed_sensors_v1") is None
    await store.delete("placed_sensors_v1")


@pytest.mark.asyncio
async def test_file_store_persists_across_instances(tmp_path):
    first = SensorCollectionStore(FileKeyValueStore(tmp_path), "placed_sensors_v1")
    added = await first.add("Front door")

    second = SensorCollectionStore(FileKeyValueStore(tmp_path), "placed_sensors_v1")
    assert await second.load() == added


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["../escape", "a/b", "", "..", "with space"])
async def test_file_store_rejects_unsafe_keys(tmp_path, key):
    store = FileKeyValueStore(tmp_path)

    with pytest.raises(ValueError):
        await store.get(key)


@pytest.mark.asyncio
async def test_file_store_wraps_os_errors(tmp_path):
    store = FileKeyValueStore(tmp_path)
    # A directory where the record file should be makes open() fail
    (tmp_path / "blocked.json").mkdir()

    with pytest.raises(StorageUnavailable) as excinfo:
        await store.get("blocked")
    assert excinfo.value.operation == "get"

    with pytest.raises(StorageUnavailable) as excinfo:
        await store.set("blocked", "{}")
    assert excinfo.value.operation == "set"


@pytest.mark.asyncio
async def test_file_store_reports_undecodable_bytes_as_parse_error(tmp_path):
    (tmp_path / "placed_sensors_v1.json").write_bytes(b"\xff\xfe not utf8")

    with pytest.raises(ParseError):
        await FileKeyValueStore(tmp_path).get("placed_sensors_v1")


@pytest.mark.asyncio
async def test_undecodable_record_files_fail_open(tmp_path):
    (tmp_path / "placed_sensors_v1.json").write_bytes(b"\xff\xfe")
    (tmp_path / "user_dimensions_v1.json").write_bytes(b"\xff\xfe")
    kv = FileKeyValueStore(tmp_path)

    assert await SensorCollectionStore(kv, "placed_sensors_v1").load() == []
    assert await DimensionProfileStore(kv, "user_dimensions_v1").load() is None

    added = await SensorCollectionStore(kv, "placed_sensors_v1").add("Door")
    assert [sensor.name for sensor in added] == ["Door"]


@pytest.mark.asyncio
async def test_overlapping_writes_to_one_key_all_succeed(tmp_path):
    store = FileKeyValueStore(tmp_path)
    payloads = ["x" * 200000 + str(index) for index in range(40)]

    results = await asyncio.gather(
        *[store.set("k", payload) for payload in payloads], return_exceptions=True
    )

    assert [result for result in results if result is not None] == []
    assert await store.get("k") in payloads
    assert list(tmp_path.glob("*.tmp")) == []


@pytest.mark.asyncio
async def test_unsafe_key_surfaces_as_configuration_error(tmp_path):
    sensors = SensorCollectionStore(FileKeyValueStore(tmp_path), "../outside")

    with pytest.raises(ValueError) as excinfo:
        await sensors.load()
    assert not isinstance(excinfo.value, StorageUnavailable)

    with pytest.raises(ValueError):
        await sensors.add("Door")
