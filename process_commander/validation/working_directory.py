"""Validateur du répertoire de travail d'une commande."""

from pathlib import Path

from process_commander.errors.exceptions import WorkingDirectoryInvalidError
from process_commander.validation.base import Validator


class WorkingDirectoryChecker(Validator):
    """Vérifie qu'un répertoire de travail existe et est un répertoire.

    Le chemin doit déjà être absolu : la résolution par rapport au
    répertoire courant est faite par l'exécuteur. Les liens
    symboliques sont suivis : un lien vers un répertoire est accepté,
    un lien cassé est signalé comme inexistant.
    """

    def __init__(self, path: str) -> None:
        """Initialise le validateur.

        Args:
            path: Chemin absolu du répertoire de travail.
        """
        self.path = path

    def validate(self) -> None:
        """Valide le répertoire de travail.

        Raises:
            WorkingDirectoryInvalidError: Si le chemin n'existe pas ou
                n'est pas un répertoire. Les deux cas se distinguent
                par le message.
        """
        path = Path(self.path)

        if not path.exists():
            raise WorkingDirectoryInvalidError(
                f"Le répertoire de travail '{self.path}' n'existe pas."
            )

        if not path.is_dir():
            raise WorkingDirectoryInvalidError(
                f"Le répertoire de travail '{self.path}' "
                f"n'est pas un répertoire."
            )
