"""Implémentations concrètes du logger basées sur le module logging."""

import logging
import os
from typing import TYPE_CHECKING, Optional

from process_commander.logging.base import Logger

if TYPE_CHECKING:
    from process_commander.config.models import LoggingConfig

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _level_and_format(
    config: Optional["LoggingConfig"],
) -> tuple[int, str]:
    """Extrait le niveau et le format depuis une LoggingConfig.

    Args:
        config: Configuration de logging ou None.

    Returns:
        Tuple (niveau numérique, format).
    """
    if config is None:
        return logging.INFO, DEFAULT_FORMAT
    level = getattr(logging, config.level, logging.INFO)
    return level, config.format


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        config: Optional["LoggingConfig"] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Section logging de CommanderConfig (niveau, format)
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level, log_format = _level_and_format(config)

        self.logger = logging.getLogger(log_file)
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            formatter = logging.Formatter(log_format)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()


class StandardLogger(Logger):
    """
    Adaptateur vers un logger nommé du module logging.

    N'ajoute aucun handler : destiné aux applications qui configurent
    déjà logging (basicConfig, dictConfig, etc.).
    """

    def __init__(
        self,
        name: str = "process_commander",
        config: Optional["LoggingConfig"] = None
    ) -> None:
        """
        Initialise l'adaptateur.

        Args:
            name: Nom du logger logging
            config: Section logging optionnelle, seul le niveau est utilisé
        """
        self.logger = logging.getLogger(name)
        if config is not None:
            self.logger.setLevel(_level_and_format(config)[0])

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)


def create_logger(
    config: Optional["LoggingConfig"] = None,
    console_output: bool = False,
) -> Logger:
    """Construit le logger adapté à une section de configuration.

    Args:
        config: Section logging de CommanderConfig.
        console_output: Dupliquer la sortie fichier sur la console.

    Returns:
        FileLogger si config.file est renseigné, StandardLogger sinon.
    """
    if config is not None and config.file:
        return FileLogger(
            config.file, config=config, console_output=console_output
        )
    return StandardLogger(config=config)
