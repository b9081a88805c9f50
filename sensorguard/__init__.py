"""Persistent registry for placed sensors and the user dimension profile."""

from .data import (
    DimensionInput,
    DimensionProfileStore,
    PlacedSensor,
    SensorCollectionStore,
    UserDimensionProfile,
)
from .errors import RegistryError, StorageUnavailable, ValidationError
from .logging_config import setup_logging
from .services import Registry, create_store
from .units import cm_to_feet_inches, feet_inches_to_cm

__all__ = [
    "DimensionInput",
    "DimensionProfileStore",
    "PlacedSensor",
    "Registry",
    "RegistryError",
    "SensorCollectionStore",
    "StorageUnavailable",
    "UserDimensionProfile",
    "ValidationError",
    "cm_to_feet_inches",
    "create_store",
    "feet_inches_to_cm",
    "setup_logging",
]
