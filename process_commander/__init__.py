"""
Process Commander - Construction et exécution de commandes système.

Modules disponibles:
- commands: Constructeur fluent (CommandBuilder), exécution synchrone
  (SubprocessCommandExecutor), rendu des commandes (ShellCommandFormatter)
  et diffusion des sorties (BroadcastWriter)
- config: Chargement de configuration TOML/JSON validée par Pydantic
  (CommanderConfig)
- errors: Exceptions et handlers d'erreurs (console, logger)
- logging: Gestion des logs (Logger, FileLogger, StandardLogger)
- validation: Validation du répertoire de travail
"""

__version__ = "1.0.0"

from process_commander.logging import (
    Logger,
    FileLogger,
    StandardLogger,
    create_logger,
)
from process_commander.config import (
    ConfigLoader,
    FileConfigLoader,
    load_config,
    CommanderConfig,
    LoggingConfig,
)
from process_commander.errors import (
    ApplicationError,
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
    StreamWriteError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from process_commander.validation import (
    Validator,
    WorkingDirectoryChecker,
)
from process_commander.commands import (
    Parameter,
    CommandSpec,
    ExecutionResult,
    CommandExecutor,
    CommandBuilder,
    CommandFormatter,
    ShellCommandFormatter,
    PlainCommandFormatter,
    BroadcastWriter,
    StreamPump,
    TextStreamWriter,
    SubprocessCommandExecutor,
)


def new_command(invocation: str) -> CommandBuilder:
    """Crée un CommandBuilder pour l'invocation donnée.

    Exemple pour `ls -al` :

        new_command("ls").add_param("-al").execute()

    Exemple pour `du -d 1 -h` :

        new_command("du").add_param("-d", "1").add_param("-h").execute()
    """
    return CommandBuilder(invocation)


__all__ = [
    # Fabrique
    "new_command",
    # Logging
    "Logger",
    "FileLogger",
    "StandardLogger",
    "create_logger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "load_config",
    "CommanderConfig",
    "LoggingConfig",
    # Errors - Exceptions
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
    # Errors - Handlers
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Validation
    "Validator",
    "WorkingDirectoryChecker",
    # Commands - Structures de données
    "Parameter",
    "CommandSpec",
    "ExecutionResult",
    # Commands - Interface abstraite
    "CommandExecutor",
    # Commands - Constructeur
    "CommandBuilder",
    # Commands - Formateurs
    "CommandFormatter",
    "ShellCommandFormatter",
    "PlainCommandFormatter",
    # Commands - Flux
    "BroadcastWriter",
    "StreamPump",
    "TextStreamWriter",
    # Commands - Implémentation
    "SubprocessCommandExecutor",
]
