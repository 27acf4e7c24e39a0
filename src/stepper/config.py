"""Configuration management for stepper."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

CONFIG_TABLE = "stepper"


class StepperConfig(BaseModel):
    """Settings for a stepper instance."""

    default_step_name: str = Field(
        default="start", min_length=1, description="Step used when no current step is set"
    )
    step_type: str = Field(
        default="default", min_length=1, description="Registered step type to instantiate"
    )
    template: str = Field(default="default", min_length=1, description="Template used by render")


def load_config(config_path: Path) -> StepperConfig:
    """Load config from a TOML file.

    Settings are read from the ``[stepper]`` table.

    Args:
        config_path: Path to the TOML file

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not config_path.exists():
        return StepperConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return StepperConfig.model_validate(data.get(CONFIG_TABLE, {}))
    except ValidationError as e:
        raise ConfigError(f"Invalid stepper config in {config_path}: {e}") from e


def write_config_template(config_path: Path) -> Path:
    """Write default config template.

    Args:
        config_path: Path of the TOML file to write

    Returns:
        Path to the written config file
    """
    template = {CONFIG_TABLE: StepperConfig().model_dump()}
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
