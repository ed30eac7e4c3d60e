"""
Module contenant les exceptions personnalisées de process_commander.

Les erreurs d'exécution ne sont jamais levées par l'exécuteur : elles
sont transportées dans ExecutionResult.error et l'appelant décide
s'il faut les lever, les afficher ou les logger.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Exception de base pour les fichiers de configuration."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class CommanderError(ApplicationError):
    """Exception de base pour les erreurs d'exécution de commande."""
    pass


class WorkingDirectoryError(CommanderError):
    """Erreur liée au répertoire de travail de la commande."""
    pass


class WorkingDirectoryUnresolvableError(WorkingDirectoryError):
    """Le répertoire de travail courant ne peut pas être déterminé."""
    pass


class WorkingDirectoryInvalidError(WorkingDirectoryError, ValidationError):
    """Le répertoire de travail résolu n'existe pas ou n'est pas
    un répertoire."""
    pass


class InvocationNotFoundError(CommanderError):
    """L'invocation est introuvable dans le $PATH."""

    def __init__(self, invocation: str, message: str) -> None:
        super().__init__(message)
        self.invocation = invocation


class ProcessError(CommanderError):
    """Erreur survenue au lancement ou pendant l'exécution du processus."""
    pass


class ProcessLaunchError(ProcessError):
    """Le système a refusé de créer le processus."""
    pass


class ProcessExitError(ProcessError):
    """Le processus s'est terminé avec un code retour non nul.

    Attributes:
        return_code: Code retour du processus. Négatif si le processus
            a été tué par un signal.
    """

    def __init__(self, return_code: int) -> None:
        if return_code < 0:
            message = f"signal: {-return_code}"
        else:
            message = f"exit status {return_code}"
        super().__init__(message)
        self.return_code = return_code


class StreamWriteError(ProcessError):
    """L'écriture vers une destination de sortie a échoué.

    Attributes:
        stream: Nom du flux concerné ("stdout" ou "stderr").
        cause: Exception d'origine levée par la destination.
    """

    def __init__(
        self, stream: str, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(
            f"Échec d'écriture sur {stream} : {cause}"
        )
        self.stream = stream
        self.cause = cause
