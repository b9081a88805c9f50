"""Validation helpers shared by the stores."""

from __future__ import annotations

from typing import Iterable, List

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..errors import ValidationError

_FIELD_LABELS = {
    "height_cm": "Height",
    "ground_to_belt_cm": "Ground to belt",
    "shoulder_to_fingertip_cm": "Shoulder to fingertip",
    "front_sensor_distance_at_touch": "Front sensor distance at touch",
}


def require_name(name: object) -> str:
    """Return ``name`` stripped, or raise if it is blank or not a string."""

    if not isinstance(name, str):
        raise ValidationError("Sensor name must be text.")
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("Sensor name is required.")
    return cleaned


def require_id(sensor_id: object) -> str:
    if not isinstance(sensor_id, str) or not sensor_id:
        raise ValidationError("Sensor id is required.")
    return sensor_id


def _label(location: tuple) -> str:
    if not location:
        return ""
    field = str(location[-1])
    for name, label in _FIELD_LABELS.items():
        if field in (name, to_camel(name)):
            return label
    return field


def to_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Translate a pydantic failure into readable, user-facing reasons."""

    reasons: List[str] = []
    for error in exc.errors():
        label = _label(tuple(error.get("loc", ())))
        message = str(error.get("msg", "is invalid"))
        # Model-level checks arrive as "Value error, <message>"
        message = message.removeprefix("Value error, ")
        if label and not error.get("type", "").startswith("value_error"):
            reasons.append(f"{label}: {message}")
        else:
            reasons.append(message)
    return ValidationError(reasons)


def require_unique_ids(sensor_ids: Iterable[str]) -> None:
    """Raise if any identifier appears more than once."""

    seen = set()
    duplicates = []
    for sensor_id in sensor_ids:
        if sensor_id in seen and sensor_id not in duplicates:
            duplicates.append(sensor_id)
        seen.add(sensor_id)
    if duplicates:
        raise ValidationError([f"Duplicate sensor id: {sensor_id}" for sensor_id in duplicates])
