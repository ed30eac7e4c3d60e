"""Interfaces abstraites et structures de données pour l'exécution
de commandes système.

Ce module définit :
    - Parameter : Paramètre (flag) d'une commande.
    - CommandSpec : État mutable accumulé par CommandBuilder.
    - ExecutionResult : Résultat immuable d'une exécution de commande.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from process_commander.errors.exceptions import CommanderError


@dataclass(frozen=True)
class Parameter:
    """Paramètre d'une commande.

    Attributes:
        label: Libellé du flag (ex: '--output').
        value: Valeur optionnelle. None pour un flag booléen.
    """

    label: str
    value: Optional[str] = None

    def tokens(self) -> List[str]:
        """Retourne les jetons bruts du paramètre, sans échappement."""
        if self.value is None:
            return [self.label]
        return [self.label, self.value]


@dataclass
class CommandSpec:
    """État mutable d'une commande en cours de construction.

    Attributes:
        invocation: Nom ou chemin du programme à exécuter.
        parameters: Paramètres dans l'ordre d'ajout.
        environment: Variables d'environnement explicites.
        include_global_environment: Hériter de os.environ avant
            d'appliquer environment.
        working_directory: Répertoire de travail (vide = répertoire
            courant au moment de l'exécution).
        mirror_stdout: Recopier stdout sur sys.stdout.
        mirror_stderr: Recopier stderr sur sys.stderr.
        stdout_sinks: Destinations binaires supplémentaires de stdout.
        stderr_sinks: Destinations binaires supplémentaires de stderr.
    """

    invocation: str
    parameters: List[Parameter] = field(default_factory=list)
    environment: Dict[str, str] = field(default_factory=dict)
    include_global_environment: bool = True
    working_directory: str = ""
    mirror_stdout: bool = False
    mirror_stderr: bool = False
    stdout_sinks: List[Any] = field(default_factory=list)
    stderr_sinks: List[Any] = field(default_factory=list)

    def snapshot(self) -> "CommandSpec":
        """Retourne une copie indépendante des collections.

        Les destinations elles-mêmes sont partagées, seules les listes
        et le dictionnaire sont copiés.
        """
        return replace(
            self,
            parameters=list(self.parameters),
            environment=dict(self.environment),
            stdout_sinks=list(self.stdout_sinks),
            stderr_sinks=list(self.stderr_sinks),
        )

    def tokens(self) -> List[str]:
        """Retourne les arguments bruts, hors invocation."""
        return [
            token
            for parameter in self.parameters
            for token in parameter.tokens()
        ]


@dataclass(frozen=True)
class ExecutionResult:
    """Résultat de l'exécution d'une commande système.

    Attributes:
        error: Erreur de résolution, de lancement ou d'exécution.
            None si la commande a réussi.
        stdout: Sortie standard capturée (complète).
        stderr: Sortie d'erreur capturée (complète).
        command: Vecteur d'arguments exécuté.
        return_code: Code de retour du processus, None si aucun
            processus n'a été lancé.
        duration: Durée d'exécution en secondes.
    """

    error: Optional[CommanderError]
    stdout: bytes = b""
    stderr: bytes = b""
    command: List[str] = field(default_factory=list)
    return_code: Optional[int] = None
    duration: float = 0.0

    @property
    def success(self) -> bool:
        """True si aucune erreur n'a été rencontrée."""
        return self.error is None

    @property
    def stdout_text(self) -> str:
        """Sortie standard décodée en UTF-8."""
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        """Sortie d'erreur décodée en UTF-8."""
        return self.stderr.decode("utf-8", errors="replace")

    def raise_for_error(self) -> "ExecutionResult":
        """Lève l'erreur portée par le résultat, s'il y en a une.

        Returns:
            Le résultat lui-même en cas de succès.

        Raises:
            CommanderError: L'erreur de l'exécution.
        """
        if self.error is not None:
            raise self.error
        return self


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes système."""

    @abstractmethod
    def execute(self, spec: CommandSpec) -> ExecutionResult:
        """Exécute une commande et retourne le résultat.

        L'exécution est synchrone et ne lève pas d'exception pour les
        erreurs de résolution ou d'exécution : elles sont portées par
        ExecutionResult.error.

        Args:
            spec: État de la commande à exécuter.

        Returns:
            Résultat de l'exécution.
        """
        pass
