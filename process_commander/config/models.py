"""Modèles Pydantic de configuration.

CommanderConfig regroupe les valeurs par défaut appliquées aux
commandes construites via CommandBuilder.from_config() et au
comportement de SubprocessCommandExecutor.from_config().
"""

import logging
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from process_commander.logging.file_logger import DEFAULT_FORMAT


class LoggingConfig(BaseModel):
    """Section [logging] de la configuration.

    Attributes:
        level: Nom du niveau logging (DEBUG, INFO, WARNING, ERROR).
        format: Format des enregistrements.
        file: Fichier de log. Si absent, le module logging standard
            est utilisé tel quel.
    """

    model_config = {"extra": "forbid"}

    level: str = "INFO"
    format: str = DEFAULT_FORMAT
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        normalized = v.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Niveau de log inconnu : {v}")
        return normalized


class CommanderConfig(BaseModel):
    """Configuration par défaut des commandes.

    Attributes:
        environment: Variables d'environnement injectées dans chaque
            commande.
        include_global_environment: Hériter de l'environnement du
            processus courant.
        working_directory: Répertoire de travail par défaut (vide =
            répertoire courant au moment de l'exécution).
        mirror_stdout: Recopier stdout du processus enfant sur
            sys.stdout.
        mirror_stderr: Recopier stderr du processus enfant sur
            sys.stderr.
        dry_run: Simuler les exécutions sans lancer de processus.
        logging: Section de configuration du logging.
    """

    model_config = {"extra": "forbid"}

    environment: Dict[str, str] = Field(default_factory=dict)
    include_global_environment: bool = True
    working_directory: str = ""
    mirror_stdout: bool = False
    mirror_stderr: bool = False
    dry_run: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
