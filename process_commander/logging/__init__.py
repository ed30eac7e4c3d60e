"""Module de logging."""

from process_commander.logging.base import Logger
from process_commander.logging.file_logger import (
    FileLogger,
    StandardLogger,
    create_logger,
)

__all__ = [
    "Logger",
    "FileLogger",
    "StandardLogger",
    "create_logger",
]
