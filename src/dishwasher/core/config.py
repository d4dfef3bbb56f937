# src/dishwasher/core/config.py
"""
Configuration schema and loading for the simulated appliance.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.

The wash cycle itself takes no configuration - this describes the state of
the simulated devices the CLI drives, plus logging output.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

ENVVAR_PREFIX = "DISHWASHER"


class SettingsFileError(Exception):
    """Raised when a settings file is not valid YAML or not a mapping."""

    pass


class DoorSettings(BaseModel):
    """Simulated door state."""

    model_config = {"frozen": True, "extra": "forbid"}

    closed: bool = Field(default=True, description="Whether the door is closed")


class FilterSettings(BaseModel):
    """Simulated dirt filter reading.

    0 means fully clogged, 100 means clean.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    capacity: float = Field(
        default=100.0,
        ge=0.0,
        le=100.0,
        description="Capacity reading reported by the filter",
    )


class FaultSettings(BaseModel):
    """Fault injection for simulated devices.

    Example YAML:
        faults:
          drain: true   # Pump fails to drain
    """

    model_config = {"frozen": True, "extra": "forbid"}

    pour: bool = Field(default=False, description="Pump faults when pouring")
    drain: bool = Field(default=False, description="Pump faults when draining")
    program: bool = Field(default=False, description="Engine faults while running the program")


class LoggingSettings(BaseModel):
    """Log output configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    json_output: bool = Field(default=False, description="Emit JSON lines instead of console output")


class ApplianceSettings(BaseModel):
    """Top-level settings for a simulated dishwasher.

    Example YAML:
        door:
          closed: true
        filter:
          capacity: 35.0
        faults:
          program: true
        logging:
          level: DEBUG
    """

    model_config = {"frozen": True, "extra": "forbid"}

    door: DoorSettings = Field(default_factory=DoorSettings)
    filter: FilterSettings = Field(default_factory=FilterSettings)
    faults: FaultSettings = Field(default_factory=FaultSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _lowercase_keys(value: Any) -> Any:
    """Recursively lowercase dict keys (Dynaconf upper-cases env-provided keys)."""
    if isinstance(value, dict):
        return {str(k).lower(): _lowercase_keys(v) for k, v in value.items()}
    return value


def _check_settings_file(config_path: Path) -> None:
    """Reject files Dynaconf would silently skip (missing, unparsable, non-mapping)."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    try:
        document = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SettingsFileError(f"Invalid YAML in settings file {config_path}: {e}") from e
    if document is not None and not isinstance(document, dict):
        raise SettingsFileError(f"Settings file {config_path} must contain a mapping, got {type(document).__name__}")


def load_settings(config_path: Path | None = None) -> ApplianceSettings:
    """Load settings from an optional YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (DISHWASHER_*) - highest priority
    2. Config file (YAML)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: DISHWASHER_FILTER__CAPACITY for nested keys.

    Args:
        config_path: Path to YAML configuration file, or None to read only
            environment variables over the schema defaults

    Returns:
        Validated ApplianceSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
        SettingsFileError: If the file is not a YAML mapping
    """
    from dynaconf import Dynaconf

    settings_files: list[str] = []
    if config_path is not None:
        _check_settings_file(config_path)
        settings_files.append(str(config_path))

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=settings_files,
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k: v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return ApplianceSettings(**_lowercase_keys(raw_config))


def resolve_settings(settings: ApplianceSettings) -> dict[str, Any]:
    """Convert validated settings to a plain dict (explicit values + defaults)."""
    return settings.model_dump(mode="json")
