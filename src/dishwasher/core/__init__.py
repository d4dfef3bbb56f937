# src/dishwasher/core/__init__.py
"""Core infrastructure: Configuration, Logging."""

from dishwasher.core.config import (
    ApplianceSettings,
    DoorSettings,
    FaultSettings,
    FilterSettings,
    LoggingSettings,
    SettingsFileError,
    load_settings,
    resolve_settings,
)
from dishwasher.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    "ApplianceSettings",
    "DoorSettings",
    "FaultSettings",
    "FilterSettings",
    "LoggingSettings",
    "SettingsFileError",
    "configure_logging",
    "get_logger",
    "load_settings",
    "resolve_settings",
]
