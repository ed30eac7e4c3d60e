"""Module de configuration."""

from process_commander.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_config
)
from process_commander.config.models import CommanderConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "load_config",
    "CommanderConfig",
    "LoggingConfig",
]
