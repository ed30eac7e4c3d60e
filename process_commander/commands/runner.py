"""Exécuteur de commandes via subprocess.

Ce module fournit SubprocessCommandExecutor, une implémentation
concrète de CommandExecutor qui lance un processus enfant de manière
synchrone à partir d'un CommandSpec.

Déroulement d'une exécution :
    1. Résolution du répertoire de travail (relatif au répertoire
       courant) et vérification qu'il s'agit d'un répertoire.
    2. Recherche de l'invocation dans le $PATH.
    3. Assemblage des arguments, sans échappement. argv[0] est
       toujours l'invocation et les paramètres commencent à argv[1].
       Les outils qui passent le premier paramètre en argv[0] (où
       'ls -ls dir' produit un listing simple) ne se comportent pas
       ainsi : un appel repris de ces outils doit retirer ce premier
       paramètre.
    4. Composition de l'environnement (global puis explicite).
    5. Branchement de stdout/stderr sur des BroadcastWriter :
       flux hérité (si activé), destinations de l'appelant, tampon
       interne.
    6. Lancement et attente de la fin du processus.

Les erreurs ne sont jamais levées : elles sont portées par
ExecutionResult.error, avec les sorties capturées jusqu'à l'erreur.
Un argument ou une variable d'environnement refusé par le système
(octet nul, nom contenant '=') produit une ProcessLaunchError.

Example :
    Exécution simple :

        from process_commander.commands import SubprocessCommandExecutor

        executor = SubprocessCommandExecutor(logger=logger)
        result = executor.execute(CommandSpec("ls"))
        print(result.stdout_text)
"""

import io
import os
import shutil
import subprocess  # nosec B404
import sys
import time
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from process_commander.commands.base import (
    CommandExecutor,
    CommandSpec,
    ExecutionResult,
)
from process_commander.commands.formatter import PlainCommandFormatter
from process_commander.commands.streams import (
    BroadcastWriter,
    StreamPump,
    inherited_stream,
)
from process_commander.errors.exceptions import (
    CommanderError,
    InvocationNotFoundError,
    ProcessExitError,
    ProcessLaunchError,
    StreamWriteError,
    WorkingDirectoryUnresolvableError,
)
from process_commander.logging.base import Logger
from process_commander.validation.working_directory import (
    WorkingDirectoryChecker,
)

if TYPE_CHECKING:
    from process_commander.config.models import CommanderConfig


class SubprocessCommandExecutor(CommandExecutor):
    """Exécuteur de commandes via subprocess.

    L'exécution bloque jusqu'à la fin du processus enfant : il n'y a
    ni timeout ni annulation. Chaque exécution travaille sur une copie
    du CommandSpec ; plusieurs exécutions peuvent tourner en parallèle
    depuis des threads distincts.

    Attributes:
        _logger: Logger optionnel. Sans logger, rien n'est journalisé.
        _dry_run: Mode simulation.
        _plain: Formateur texte brut pour les messages de log.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        dry_run: bool = False,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel pour tracer les exécutions.
            dry_run: Si True, simule sans exécuter.
        """
        self._logger = logger
        self._dry_run = dry_run
        self._plain = PlainCommandFormatter()

    @classmethod
    def from_config(
        cls,
        config: "CommanderConfig",
        logger: Optional[Logger] = None,
    ) -> "SubprocessCommandExecutor":
        """Crée un exécuteur à partir d'une CommanderConfig.

        Args:
            config: Configuration chargée via load_config().
            logger: Logger optionnel.

        Returns:
            Exécuteur configuré (mode dry_run compris).
        """
        return cls(logger=logger, dry_run=config.dry_run)

    @property
    def dry_run(self) -> bool:
        """True si l'exécuteur simule les exécutions."""
        return self._dry_run

    def _log(self, message: str) -> None:
        """Envoie un message au logger si disponible.

        Args:
            message: Message à logger.
        """
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        """Envoie un message d'erreur au logger si disponible.

        Args:
            message: Message d'erreur à logger.
        """
        if self._logger:
            self._logger.log_error(message)

    def _resolve_working_directory(self, working_directory: str) -> str:
        """Détermine le répertoire de travail absolu.

        Un chemin relatif est résolu par rapport au répertoire courant
        du processus, jamais par rapport à une exécution précédente.

        Args:
            working_directory: Chemin stocké dans le CommandSpec.

        Returns:
            Chemin absolu normalisé.

        Raises:
            WorkingDirectoryUnresolvableError: Si le répertoire courant
                est introuvable.
            WorkingDirectoryInvalidError: Si le chemin n'existe pas ou
                n'est pas un répertoire.
        """
        if working_directory and os.path.isabs(working_directory):
            resolved = os.path.normpath(working_directory)
        else:
            try:
                cwd = os.getcwd()
            except OSError as e:
                raise WorkingDirectoryUnresolvableError(
                    f"Impossible de déterminer le répertoire courant : {e}"
                ) from e
            resolved = os.path.normpath(
                os.path.join(cwd, working_directory)
            )
        WorkingDirectoryChecker(resolved).validate()
        return resolved

    def _resolve_invocation(
        self, invocation: str, working_directory: str
    ) -> str:
        """Localise l'exécutable de l'invocation.

        Un résultat contenant un séparateur de répertoire mais relatif
        est rattaché au répertoire de travail.

        Args:
            invocation: Nom ou chemin du programme.
            working_directory: Répertoire de travail résolu.

        Returns:
            Chemin de l'exécutable.

        Raises:
            InvocationNotFoundError: Si l'invocation est introuvable.
        """
        full_path = shutil.which(invocation)
        if full_path is None:
            raise InvocationNotFoundError(
                invocation,
                f"Invocation '{invocation}' introuvable dans le $PATH.",
            )
        if os.sep in full_path and not os.path.isabs(full_path):
            full_path = os.path.join(working_directory, full_path)
        return full_path

    def _build_env(self, spec: CommandSpec) -> Dict[str, str]:
        """Construit l'environnement d'exécution.

        Les variables explicites sont appliquées après l'environnement
        global et sont donc prioritaires.

        Args:
            spec: État de la commande.

        Returns:
            Dictionnaire d'environnement complet.
        """
        env: Dict[str, str] = {}
        if spec.include_global_environment:
            env.update(os.environ)
        env.update(spec.environment)
        return env

    def _build_writer(
        self,
        mirror: bool,
        standard_stream: Any,
        sinks: List[Any],
    ) -> Tuple[BroadcastWriter, io.BytesIO]:
        """Assemble le diffuseur d'un flux de sortie.

        Args:
            mirror: Recopier sur le flux standard hérité.
            standard_stream: sys.stdout ou sys.stderr.
            sinks: Destinations ajoutées par l'appelant.

        Returns:
            Tuple (diffuseur, tampon de capture interne).
        """
        capture = io.BytesIO()
        targets = list(sinks)
        if mirror:
            standard_stream.flush()
            targets.insert(0, inherited_stream(standard_stream))
        targets.append(capture)
        return BroadcastWriter(targets), capture

    def _failure(
        self,
        spec: CommandSpec,
        error: CommanderError,
        command: List[str],
        start: float,
        stdout: bytes = b"",
        stderr: bytes = b"",
        return_code: Optional[int] = None,
    ) -> ExecutionResult:
        """Logue un échec et construit le résultat correspondant."""
        self._log_error(
            self._plain.format_failure(
                spec.invocation, spec.parameters, error
            )
        )
        return ExecutionResult(
            error=error,
            stdout=stdout,
            stderr=stderr,
            command=command,
            return_code=return_code,
            duration=time.monotonic() - start,
        )

    def execute(self, spec: CommandSpec) -> ExecutionResult:
        """Exécute la commande et retourne le résultat.

        Args:
            spec: État de la commande. Il n'est pas modifié.

        Returns:
            ExecutionResult avec l'erreur éventuelle et les sorties
            capturées complètes.
        """
        spec = spec.snapshot()
        command = [spec.invocation] + spec.tokens()

        if self._dry_run:
            self._log(
                self._plain.format_dry_run(spec.invocation, spec.parameters)
            )
            return ExecutionResult(
                error=None, command=command, return_code=0
            )

        start = time.monotonic()
        try:
            working_directory = self._resolve_working_directory(
                spec.working_directory
            )
            executable = self._resolve_invocation(
                spec.invocation, working_directory
            )
        except CommanderError as e:
            return self._failure(spec, e, command, start)

        self._log(self._plain.format_start(spec.invocation, spec.parameters))

        stdout_writer, stdout_capture = self._build_writer(
            spec.mirror_stdout, sys.stdout, spec.stdout_sinks
        )
        stderr_writer, stderr_capture = self._build_writer(
            spec.mirror_stderr, sys.stderr, spec.stderr_sinks
        )

        try:
            proc = subprocess.Popen(  # nosec B603
                command,
                executable=executable,
                cwd=working_directory,
                env=self._build_env(spec),
                stdin=None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            return self._failure(
                spec,
                ProcessLaunchError(
                    f"Impossible de lancer '{executable}' : {e}"
                ),
                command,
                start,
            )

        pumps = [
            StreamPump("stdout", proc.stdout, stdout_writer).start(),
            StreamPump("stderr", proc.stderr, stderr_writer).start(),
        ]
        try:
            return_code = proc.wait()
        finally:
            for pump in pumps:
                pump.join()

        error: Optional[CommanderError] = None
        if return_code != 0:
            error = ProcessExitError(return_code)
        else:
            for pump in pumps:
                if pump.error is not None:
                    error = StreamWriteError(pump.name, pump.error)
                    break

        if error is not None:
            return self._failure(
                spec,
                error,
                command,
                start,
                stdout=stdout_capture.getvalue(),
                stderr=stderr_capture.getvalue(),
                return_code=return_code,
            )

        return ExecutionResult(
            error=None,
            stdout=stdout_capture.getvalue(),
            stderr=stderr_capture.getvalue(),
            command=command,
            return_code=return_code,
            duration=time.monotonic() - start,
        )
