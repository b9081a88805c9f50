"""Configuration management for SensorGuard."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SENSORGUARD_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    debug: bool = Field(False)
    log_level: str = Field("INFO")

    # Persistence substrate
    storage_backend: Literal["auto", "memory", "file"] = Field("auto")
    data_root: Path = Field(Path("./data"))

    # Record keys
    sensors_key: str = Field("placed_sensors_v1", min_length=1)
    profile_key: str = Field("user_dimensions_v1", min_length=1)


# Global settings instance
settings = Settings()
