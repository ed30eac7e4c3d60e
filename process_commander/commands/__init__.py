"""Module de construction et d'exécution de commandes système.

Ce module fournit des classes pour construire et exécuter
des commandes système de manière structurée.

Classes disponibles :
    Parameter : Paramètre (flag) d'une commande.
    CommandSpec : État mutable d'une commande.
    ExecutionResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandBuilder : Constructeur fluent de commandes.
    SubprocessCommandExecutor : Exécuteur concret via subprocess.
    CommandFormatter : Interface abstraite de formatage.
    ShellCommandFormatter : Rendu façon shell (aperçu, dry-run).
    PlainCommandFormatter : Messages de log texte brut.
    BroadcastWriter : Diffusion d'un flux vers plusieurs destinations.
"""

from process_commander.commands.base import (
    Parameter,
    CommandSpec,
    ExecutionResult,
    CommandExecutor,
)
from process_commander.commands.formatter import (
    CommandFormatter,
    ShellCommandFormatter,
    PlainCommandFormatter,
)
from process_commander.commands.streams import (
    BroadcastWriter,
    StreamPump,
    TextStreamWriter,
)
from process_commander.commands.runner import (
    SubprocessCommandExecutor,
)
from process_commander.commands.builder import CommandBuilder

__all__ = [
    # Structures de données
    "Parameter",
    "CommandSpec",
    "ExecutionResult",
    # Interface abstraite
    "CommandExecutor",
    # Constructeur
    "CommandBuilder",
    # Formateurs
    "CommandFormatter",
    "ShellCommandFormatter",
    "PlainCommandFormatter",
    # Flux
    "BroadcastWriter",
    "StreamPump",
    "TextStreamWriter",
    # Implémentation subprocess
    "SubprocessCommandExecutor",
]
