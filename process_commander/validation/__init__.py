"""Module de validation."""

from process_commander.validation.base import Validator
from process_commander.validation.working_directory import (
    WorkingDirectoryChecker,
)

__all__ = [
    "Validator",
    "WorkingDirectoryChecker",
]
