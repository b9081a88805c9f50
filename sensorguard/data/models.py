"""Domain models stored by the registry."""

from __future__ import annotations

from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


def new_sensor_id() -> str:
    """Return a fresh collision-resistant, URL-safe sensor identifier."""

    return uuid4().hex


class _CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PlacedSensor(_CamelModel):
    """A physical sensor the user has placed."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str

    def renamed(self, name: str) -> "PlacedSensor":
        """Return a copy carrying ``name`` and the same identifier."""

        return self.model_copy(update={"name": name})


class DimensionInput(_CamelModel):
    """Measurements supplied by the caller when saving the profile.

    Only types are checked here; the profile store enforces the invariants.
    """

    height_cm: float
    ground_to_belt_cm: float
    shoulder_to_fingertip_cm: float
    front_sensor_distance_at_touch: Optional[float] = None

    @property
    def supplies_calibration(self) -> bool:
        """True when the calibration field was given explicitly."""

        return "front_sensor_distance_at_touch" in self.model_fields_set


class UserDimensionProfile(_CamelModel):
    """The user's body measurements in centimeters."""

    model_config = ConfigDict(frozen=True)

    height_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Total body height")
    ground_to_belt_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Ground to belt height")
    shoulder_to_fingertip_cm: float = Field(..., gt=0, allow_inf_nan=False, description="Arm reach")
    front_sensor_distance_at_touch: Optional[float] = Field(
        None, allow_inf_nan=False, description="Front sensor reading with fingertips on a wall"
    )

    @model_validator(mode="after")
    def _belt_below_head(self) -> "UserDimensionProfile":
        if self.ground_to_belt_cm >= self.height_cm:
            raise ValueError("Ground to belt must be less than total height.")
        return self

    @computed_field(alias="beltToHeadCm")  # type: ignore[prop-decorator]
    @property
    def belt_to_head_cm(self) -> float:
        """Belt to top of head, always derived from height and belt."""

        return self.height_cm - self.ground_to_belt_cm

    def to_document(self) -> dict:
        """Return the JSON-ready persisted form."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
