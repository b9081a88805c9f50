"""Data persistence utilities."""

from .models import DimensionInput, PlacedSensor, UserDimensionProfile, new_sensor_id
from .repository import DimensionProfileStore, SensorCollectionStore

__all__ = [
    "DimensionInput",
    "DimensionProfileStore",
    "PlacedSensor",
    "SensorCollectionStore",
    "UserDimensionProfile",
    "new_sensor_id",
]
