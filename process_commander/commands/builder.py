"""Constructeur fluent pour assembler et exécuter des commandes système.

Ce module fournit la classe CommandBuilder qui accumule l'invocation,
les paramètres, l'environnement, le répertoire de travail et les
destinations de sortie via une API fluent, puis délègue l'exécution
à un CommandExecutor.

Example:
    Exécution de `du -d 1 -h` avec recopie de stdout sur la console :

        from process_commander.commands import CommandBuilder

        result = (
            CommandBuilder("du")
            .add_param("-d", "1")
            .add_param("-h")
            .enable_stdout()
            .execute()
        )
        if not result.success:
            print(result.error)

Note:
    Un CommandBuilder n'est pas protégé contre les modifications
    concurrentes : le modifier depuis un thread pendant qu'un autre
    l'exécute relève de la responsabilité de l'appelant. Une exécution
    en cours travaille toutefois sur sa propre copie de l'état.
"""

from typing import IO, TYPE_CHECKING, List, Optional

from process_commander.commands.base import (
    CommandExecutor,
    CommandSpec,
    ExecutionResult,
    Parameter,
)
from process_commander.commands.formatter import ShellCommandFormatter
from process_commander.commands.runner import SubprocessCommandExecutor

if TYPE_CHECKING:
    from process_commander.config.models import CommanderConfig


class CommandBuilder:
    """Constructeur fluent de commandes système.

    Chaque méthode de modification retourne l'instance courante pour
    le chaînage.
    """

    def __init__(
        self,
        invocation: str,
        executor: Optional[CommandExecutor] = None,
    ) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            invocation: Nom ou chemin du programme à exécuter.
            executor: Exécuteur utilisé par execute() (par défaut un
                SubprocessCommandExecutor sans logger).

        Raises:
            ValueError: Si invocation est vide.
        """
        if not invocation or not invocation.strip():
            raise ValueError("Le programme est requis.")
        self._spec = CommandSpec(invocation=invocation)
        self._executor = executor or SubprocessCommandExecutor()

    @classmethod
    def from_config(
        cls,
        invocation: str,
        config: "CommanderConfig",
        executor: Optional[CommandExecutor] = None,
    ) -> "CommandBuilder":
        """Crée un constructeur pré-rempli depuis une CommanderConfig.

        Args:
            invocation: Nom ou chemin du programme à exécuter.
            config: Valeurs par défaut (environnement, répertoire de
                travail, recopie des flux).
            executor: Exécuteur optionnel. Par défaut, un
                SubprocessCommandExecutor respectant config.dry_run.

        Returns:
            Nouveau constructeur.
        """
        builder = cls(
            invocation,
            executor=executor
            or SubprocessCommandExecutor.from_config(config),
        )
        for key, value in config.environment.items():
            builder.set_environment(key, value)
        if not config.include_global_environment:
            builder.disable_global_environment()
        if config.working_directory:
            builder.set_working_directory(config.working_directory)
        if config.mirror_stdout:
            builder.enable_stdout()
        if config.mirror_stderr:
            builder.enable_stderr()
        return builder

    @property
    def spec(self) -> CommandSpec:
        """État courant de la commande."""
        return self._spec

    @property
    def invocation(self) -> str:
        """Programme à exécuter."""
        return self._spec.invocation

    def add_param(
        self, label: str, value: Optional[str] = None
    ) -> "CommandBuilder":
        """Ajoute un paramètre.

        Sans valeur, le paramètre est un flag booléen
        (ex: '--enable-something'). Avec une valeur, il produit deux
        jetons (ex: '--some-value 1').

        Args:
            label: Libellé du paramètre, non validé.
            value: Valeur optionnelle.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.parameters.append(Parameter(label, value))
        return self

    def add_stdout(self, output: IO[bytes]) -> "CommandBuilder":
        """Ajoute une destination supplémentaire pour stdout.

        Args:
            output: Objet binaire exposant write(bytes).

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.stdout_sinks.append(output)
        return self

    def add_stderr(self, output: IO[bytes]) -> "CommandBuilder":
        """Ajoute une destination supplémentaire pour stderr.

        Args:
            output: Objet binaire exposant write(bytes).

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.stderr_sinks.append(output)
        return self

    def set_stdout(self, output: IO[bytes]) -> "CommandBuilder":
        """Remplace toutes les destinations de stdout par output.

        La recopie vers sys.stdout (enable_stdout) n'est pas affectée.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.stdout_sinks = [output]
        return self

    def set_stderr(self, output: IO[bytes]) -> "CommandBuilder":
        """Remplace toutes les destinations de stderr par output.

        La recopie vers sys.stderr (enable_stderr) n'est pas affectée.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.stderr_sinks = [output]
        return self

    def enable_stdout(self) -> "CommandBuilder":
        """Active la recopie de stdout sur sys.stdout."""
        self._spec.mirror_stdout = True
        return self

    def enable_stderr(self) -> "CommandBuilder":
        """Active la recopie de stderr sur sys.stderr."""
        self._spec.mirror_stderr = True
        return self

    def set_environment(self, key: str, value: str) -> "CommandBuilder":
        """Définit une variable d'environnement de la commande.

        Un second appel avec la même clé remplace la valeur.

        Args:
            key: Nom de la variable.
            value: Valeur de la variable.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.environment[key] = value
        return self

    def disable_global_environment(self) -> "CommandBuilder":
        """N'injecte pas l'environnement du processus courant.

        Seules les variables définies via set_environment() seront
        transmises au processus enfant.
        """
        self._spec.include_global_environment = False
        return self

    def set_working_directory(self, path: str) -> "CommandBuilder":
        """Définit le répertoire de travail.

        Le chemin est stocké tel quel ; un chemin relatif est résolu
        au moment de l'exécution par rapport au répertoire courant.

        Args:
            path: Chemin absolu ou relatif.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._spec.working_directory = path
        return self

    def build(self) -> List[str]:
        """Construit et retourne la commande sous forme de liste.

        Returns:
            Liste [invocation, jetons...] sans échappement.
        """
        return [self._spec.invocation] + self._spec.tokens()

    def get_as_string(self, one_line: bool = False) -> str:
        """Retourne la commande sous forme de chaîne lisible.

        Utile pour afficher la commande avant exécution ou pour
        l'enregistrer dans un script.

        Args:
            one_line: Rendu sur une seule ligne au lieu d'une ligne
                par paramètre.

        Returns:
            Commande rendue, terminée par ';'.
        """
        return ShellCommandFormatter(one_line=one_line).format_command(
            self._spec.invocation, self._spec.parameters
        )

    def execute(self) -> ExecutionResult:
        """Exécute la commande de manière synchrone.

        Returns:
            ExecutionResult portant l'erreur éventuelle et les sorties
            capturées.
        """
        return self._executor.execute(self._spec)
