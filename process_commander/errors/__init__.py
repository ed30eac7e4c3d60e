"""Module de gestion des erreurs."""

from process_commander.errors.exceptions import (ApplicationError,
                                                 ConfigurationError,
                                                 FileConfigurationError,
                                                 ValidationError,
                                                 CommanderError,
                                                 WorkingDirectoryError,
                                                 WorkingDirectoryUnresolvableError,
                                                 WorkingDirectoryInvalidError,
                                                 InvocationNotFoundError,
                                                 ProcessError,
                                                 ProcessLaunchError,
                                                 ProcessExitError,
                                                 StreamWriteError)
from process_commander.errors.base import ErrorHandler, ErrorHandlerChain
from process_commander.errors.console_handler import ConsoleErrorHandler
from process_commander.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "CommanderError",
    "WorkingDirectoryError",
    "WorkingDirectoryUnresolvableError",
    "WorkingDirectoryInvalidError",
    "InvocationNotFoundError",
    "ProcessError",
    "ProcessLaunchError",
    "ProcessExitError",
    "StreamWriteError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
