"""Formateurs pour l'affichage des commandes.

Ce module fournit une hiérarchie de formateurs permettant d'afficher
une commande sous forme de chaîne lisible (aperçu, dry-run) et de
construire les messages de log de l'exécuteur.

Classes :
    CommandFormatter : Interface abstraite de formatage.
    ShellCommandFormatter : Rendu façon shell, multi-ligne ou sur
        une seule ligne.
    PlainCommandFormatter : Messages de log texte brut.

Example :
    Rendu multi-ligne :

        formatter = ShellCommandFormatter()
        formatter.format_command(
            "du", [Parameter("-d", "1"), Parameter("-h")]
        )
        # du \\
        #   -d 1 \\
        #   -h;

Note :
    Les guillemets présents dans une valeur ne sont pas échappés :
    '"value 5"' est rendu '""value 5""'. Ce comportement est conservé
    pour la compatibilité des sorties existantes.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from process_commander.commands.base import Parameter


class CommandFormatter(ABC):
    """Interface abstraite pour formater une commande.

    Chaque implémentation définit sa propre représentation de
    l'invocation et de ses paramètres.
    """

    @abstractmethod
    def format_command(
        self, invocation: str, parameters: Sequence[Parameter]
    ) -> str:
        """Formate une commande complète.

        Args:
            invocation: Programme à exécuter.
            parameters: Paramètres dans l'ordre d'ajout.

        Returns:
            Commande formatée prête à l'affichage.
        """
        pass


class ShellCommandFormatter(CommandFormatter):
    """Rendu d'une commande façon script shell.

    En mode multi-ligne (défaut), chaque paramètre est placé sur sa
    propre ligne après une continuation ' \\'. En mode une ligne,
    les jetons sont séparés par un espace. La chaîne se termine
    toujours par ';'.

    Attributes:
        one_line: Rendu sur une seule ligne.
    """

    MULTI_LINE_DELIMITER = " \\\n  "
    ONE_LINE_DELIMITER = " "

    def __init__(self, one_line: bool = False) -> None:
        """Initialise le formateur.

        Args:
            one_line: True pour un rendu sur une seule ligne.
        """
        self.one_line = one_line

    @property
    def delimiter(self) -> str:
        """Séparateur placé avant chaque paramètre."""
        if self.one_line:
            return self.ONE_LINE_DELIMITER
        return self.MULTI_LINE_DELIMITER

    @staticmethod
    def format_value(value: str) -> str:
        """Met une valeur entre guillemets si elle contient un espace.

        Args:
            value: Valeur brute du paramètre.

        Returns:
            Valeur prête à l'affichage.
        """
        if " " in value:
            return f'"{value}"'
        return value

    def format_parameter(self, parameter: Parameter) -> str:
        """Formate un paramètre isolé ('label' ou 'label valeur')."""
        if parameter.value is None:
            return parameter.label
        return f"{parameter.label} {self.format_value(parameter.value)}"

    def format_command(
        self, invocation: str, parameters: Sequence[Parameter]
    ) -> str:
        """Formate la commande avec le séparateur configuré."""
        parts: List[str] = [invocation]
        parts.extend(
            f"{self.delimiter}{self.format_parameter(parameter)}"
            for parameter in parameters
        )
        return "".join(parts) + ";"


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les messages de log.

    Utilise un rendu shell sur une seule ligne, compatible avec les
    fichiers de log et les outils grep.

    Example :
        Exécution : ls -l /tmp;
        [dry-run] rm -rf /tmp/cache;
        Échec : ls /absent; (exit status 2)
    """

    def __init__(self) -> None:
        """Initialise le formateur avec un rendu une ligne."""
        self._shell = ShellCommandFormatter(one_line=True)

    def format_command(
        self, invocation: str, parameters: Sequence[Parameter]
    ) -> str:
        """Retourne la commande rendue sur une ligne."""
        return self._shell.format_command(invocation, parameters)

    def format_start(
        self, invocation: str, parameters: Sequence[Parameter]
    ) -> str:
        """Formate le message de début d'exécution."""
        return f"Exécution : {self.format_command(invocation, parameters)}"

    def format_dry_run(
        self, invocation: str, parameters: Sequence[Parameter]
    ) -> str:
        """Formate le message de simulation."""
        return f"[dry-run] {self.format_command(invocation, parameters)}"

    def format_failure(
        self,
        invocation: str,
        parameters: Sequence[Parameter],
        error: Exception,
    ) -> str:
        """Formate le message d'échec d'une exécution."""
        return (
            f"Échec : {self.format_command(invocation, parameters)} "
            f"({error})"
        )
