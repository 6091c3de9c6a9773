"""Configuration management using Pydantic settings."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Spawning settings loaded from environment variables (HORDE_*)."""

    model_config = SettingsConfigDict(
        env_prefix="HORDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog (empty = bundled horde/data/monsters.json)
    catalog_path: str = ""

    # Wave progress
    wave_duration_seconds: float = 30.0
    auto_start: bool = True

    # Difficulty curve
    time_weight_minutes: float = Field(default=1.0, ge=0.0)
    wave_weight: float = Field(default=0.75, ge=0.0)
    global_exponent: float = Field(default=0.9, gt=0.0)
    soft_cap_strength: float = Field(default=0.15, ge=0.0)

    # Spawn cadence
    interval_floor_seconds: float = Field(default=0.1, gt=0.0)
    retune_epsilon_seconds: float = Field(default=0.001, ge=0.0)
    rearm_policy: Literal["next", "restart", "preserve"] = "next"
    spawn_on_start: bool = False

    # Spawn positions
    spawn_point_policy: Literal["cycle", "random", "external"] = "cycle"

    # Reproducible monster picks when set
    rng_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"


settings = Settings()
