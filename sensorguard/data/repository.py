"""Persistence for placed sensors and the user dimension profile.

Every operation re-reads its record from the key-value service, computes the
new value in memory and writes the whole record back. Nothing is cached
between calls, and two overlapping writes resolve as last-writer-wins.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..errors import ParseError, StorageUnavailable
from ..storage import KeyValueStore
from .models import DimensionInput, PlacedSensor, UserDimensionProfile, new_sensor_id
from .validation import require_id, require_name, require_unique_ids, to_validation_error

logger = logging.getLogger(__name__)


class _RecordStore:
    """Owns one key in the key-value service."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self._store = store
        self.key = key

    async def _read_raw(self) -> Optional[str]:
        try:
            raw = await self._store.get(self.key)
        except OSError as exc:
            logger.error("Reading %s failed: %s", self.key, exc)
            raise StorageUnavailable(self.key, "get", str(exc)) from exc
        logger.debug("Read %s (%s)", self.key, "missing" if raw is None else f"{len(raw)} chars")
        return raw

    async def _write_raw(self, payload: Any) -> None:
        document = json.dumps(payload, separators=(",", ":"))
        try:
            await self._store.set(self.key, document)
        except OSError as exc:
            logger.error("Writing %s failed: %s", self.key, exc)
            raise StorageUnavailable(self.key, "set", str(exc)) from exc
        logger.debug("Wrote %s (%d chars)", self.key, len(document))

    def _decode(self, raw: str) -> Any:
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"{self.key} is not valid JSON: {exc}") from exc


class SensorCollectionStore(_RecordStore):
    """Ordered collection of placed sensors, newest first."""

    def __init__(self, store: KeyValueStore, key: Optional[str] = None) -> None:
        super().__init__(store, key or settings.sensors_key)

    async def load(self) -> List[PlacedSensor]:
        """Return the stored sensors, or an empty list if none are readable."""

        try:
            raw = await self._read_raw()
            if raw is None:
                return []
            return self._parse(raw)
        except ParseError as exc:
            logger.warning("Discarding unreadable sensor collection: %s", exc)
            return []

    async def replace(self, sensors: Sequence[PlacedSensor]) -> None:
        """Overwrite the stored collection with ``sensors``."""

        require_unique_ids(sensor.id for sensor in sensors)
        await self._write_raw([sensor.model_dump(mode="json", by_alias=True) for sensor in sensors])

    async def get(self, sensor_id: str) -> Optional[PlacedSensor]:
        """Return the sensor with ``sensor_id`` if it exists."""

        for sensor in await self.load():
            if sensor.id == sensor_id:
                return sensor
        return None

    async def add(self, name: str) -> List[PlacedSensor]:
        """Create a sensor called ``name`` at the front of the collection."""

        sensor = PlacedSensor(id=new_sensor_id(), name=require_name(name))
        current = await self.load()
        updated = [sensor, *current]
        await self.replace(updated)
        logger.info("Added sensor %s (%r)", sensor.id, sensor.name)
        return updated

    async def update(self, sensor: PlacedSensor) -> List[PlacedSensor]:
        """Rename the stored sensor sharing ``sensor.id``.

        An unknown id leaves the collection untouched; the entry may have been
        removed in the meantime.
        """

        sensor_id = require_id(sensor.id)
        name = require_name(sensor.name)
        current = await self.load()
        if not any(existing.id == sensor_id for existing in current):
            logger.info("Sensor %s not found, nothing to update", sensor_id)
            return current

        updated = [existing.renamed(name) if existing.id == sensor_id else existing for existing in current]
        await self.replace(updated)
        logger.info("Renamed sensor %s to %r", sensor_id, name)
        return updated

    async def remove(self, sensor_id: str) -> List[PlacedSensor]:
        """Drop every sensor with ``sensor_id``; unknown ids are ignored."""

        current = await self.load()
        updated = [sensor for sensor in current if sensor.id != sensor_id]
        if len(updated) == len(current):
            logger.info("Sensor %s not found, nothing to remove", sensor_id)
            return current

        await self.replace(updated)
        logger.info("Removed sensor %s", sensor_id)
        return updated

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _parse(self, raw: str) -> List[PlacedSensor]:
        payload = self._decode(raw)
        if not isinstance(payload, list):
            raise ParseError(f"{self.key} holds {type(payload).__name__}, expected a list")

        sensors: List[PlacedSensor] = []
        seen = set()
        for index, entry in enumerate(payload):
            try:
                sensor = PlacedSensor.model_validate(entry)
            except PydanticValidationError as exc:
                logger.warning("Skipping malformed sensor at index %d in %s: %s", index, self.key, exc)
                continue
            if sensor.id in seen:
                logger.warning("Skipping duplicate sensor id %s at index %d in %s", sensor.id, index, self.key)
                continue
            seen.add(sensor.id)
            sensors.append(sensor)
        return sensors


class DimensionProfileStore(_RecordStore):
    """Single user dimension profile, always replaced as a whole."""

    def __init__(self, store: KeyValueStore, key: Optional[str] = None) -> None:
        super().__init__(store, key or settings.profile_key)

    async def load(self) -> Optional[UserDimensionProfile]:
        """Return the saved profile, or None if absent or unreadable."""

        try:
            raw = await self._read_raw()
            if raw is None:
                return None
            return self._parse(raw)
        except ParseError as exc:
            logger.warning("Discarding unreadable dimension profile: %s", exc)
            return None

    async def save(self, data: Union[DimensionInput, Mapping[str, Any]]) -> UserDimensionProfile:
        """Validate ``data`` and persist it as the new profile.

        The calibration value is carried over from the previous profile
        unless ``data`` supplies one explicitly.

        Raises:
            ValidationError: if the measurements break a profile invariant.
                Nothing is written in that case.
        """

        try:
            dimensions = data if isinstance(data, DimensionInput) else DimensionInput.model_validate(data)
        except PydanticValidationError as exc:
            raise to_validation_error(exc) from exc

        values = dimensions.model_dump(exclude={"front_sensor_distance_at_touch"})
        if dimensions.supplies_calibration:
            values["front_sensor_distance_at_touch"] = dimensions.front_sensor_distance_at_touch

        # Reject invalid input before any storage I/O.
        try:
            profile = UserDimensionProfile.model_validate(values)
        except PydanticValidationError as exc:
            raise to_validation_error(exc) from exc

        if not dimensions.supplies_calibration:
            previous = await self.load()
            if previous is not None and previous.front_sensor_distance_at_touch is not None:
                profile = profile.model_copy(
                    update={"front_sensor_distance_at_touch": previous.front_sensor_distance_at_touch}
                )

        await self._write_raw(profile.to_document())
        logger.info(
            "Saved dimension profile (height %.1f cm, belt %.1f cm)",
            profile.height_cm,
            profile.ground_to_belt_cm,
        )
        return profile

    def _parse(self, raw: str) -> UserDimensionProfile:
        payload = self._decode(raw)
        if not isinstance(payload, dict):
            raise ParseError(f"{self.key} holds {type(payload).__name__}, expected an object")
        try:
            return UserDimensionProfile.model_validate(payload)
        except PydanticValidationError as exc:
            raise ParseError(f"{self.key} does not match the profile schema: {exc}") from exc
