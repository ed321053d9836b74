"""Configuration management for the avatar bot.

Loads configuration from YAML files and validates against Pydantic models.
Per-behavior tuning lives in the free-form ``behaviors`` section and is
handed to each behavior's config dataclass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from avatar_bot.behaviors.updater import BehaviorConfigs
from avatar_bot.errors import ConfigurationError

DEFAULT_ASSET_BASE_URL = "https://s3-us-west-1.amazonaws.com/highfidelity-public"


class SpawnConfig(BaseModel):
    """Bounding box the bot spawns and walks in (world units)."""

    x_min: float = Field(default=20.0)
    x_max: float = Field(default=25.0)
    z_min: float = Field(default=20.0)
    z_max: float = Field(default=25.0)
    y_pelvis: float = Field(default=2.5, description="Fixed pelvis height")

    @model_validator(mode="after")
    def _check_bounds(self) -> SpawnConfig:
        if self.x_min >= self.x_max:
            raise ValueError("x_min must be less than x_max")
        if self.z_min >= self.z_max:
            raise ValueError("z_min must be less than z_max")
        return self


class AssetsConfig(BaseModel):
    """Asset catalog configuration."""

    base_url: str = Field(default=DEFAULT_ASSET_BASE_URL)
    bot_number: int | None = Field(
        default=None,
        ge=1,
        le=100,
        description="Fixed appearance; random in [1, 100] when unset",
    )


class SimulationConfig(BaseModel):
    """Settings for running against the simulated host."""

    fps: float = Field(default=60.0, gt=0.0, le=1000.0)
    duration_seconds: float = Field(default=10.0, ge=0.0)
    realtime: bool = Field(default=False)
    seed: int | None = Field(default=None)


class BotConfig(BaseModel):
    """Main avatar bot configuration."""

    version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    spawn: SpawnConfig = Field(default_factory=SpawnConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    behaviors: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("behaviors")
    @classmethod
    def _check_behaviors(cls, value: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        try:
            BehaviorConfigs.from_dict(value)
        except ValidationError as e:
            raise ValueError(f"Invalid behavior settings: {e}") from e
        return value

    def behavior_configs(self) -> BehaviorConfigs:
        """Typed per-behavior settings built from the ``behaviors`` section."""
        return BehaviorConfigs.from_dict(self.behaviors)

    @classmethod
    def from_yaml(cls, path: Path) -> BotConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Validated BotConfig instance.

        Raises:
            ConfigurationError: If the file is missing, malformed or invalid.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(path, f"Cannot read config file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(path, f"Malformed YAML: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(path, f"Invalid configuration: {e}") from e


class EnvSettings(BaseSettings):
    """Environment variable settings."""

    model_config = SettingsConfigDict(
        env_prefix="AVATAR_BOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Enable debug logging")
    log_json: bool = Field(default=False, description="Emit JSON log lines")


def load_config(
    config_path: Path | None = None,
    default_paths: list[Path] | None = None,
) -> BotConfig:
    """Load configuration from file or use defaults.

    Search order:
    1. Explicit config_path if provided
    2. Default paths in order: ./config/default.yaml, ~/.avatar_bot/config.yaml
    3. Built-in defaults if no file found
    """
    if default_paths is None:
        default_paths = [
            Path("config/default.yaml"),
            Path.home() / ".avatar_bot" / "config.yaml",
        ]

    if config_path is not None:
        return BotConfig.from_yaml(config_path)

    for path in default_paths:
        if path.exists():
            return BotConfig.from_yaml(path)

    return BotConfig()


def get_env_settings() -> EnvSettings:
    """Load environment settings."""
    return EnvSettings()
