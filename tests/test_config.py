"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from process_commander.config import (
    CommanderConfig,
    ConfigLoader,
    FileConfigLoader,
    LoggingConfig,
    load_config,
)
from process_commander.errors import ConfigurationError, FileConfigurationError


TOML_CONFIG = """
include_global_environment = false
working_directory = "/srv"
mirror_stdout = true
dry_run = true

[environment]
LANG = "C"
TZ = "UTC"

[logging]
level = "debug"
file = "/var/log/commander.log"
"""


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        """Crée le chargeur."""
        self.loader = FileConfigLoader()

    def test_implemente_interface(self):
        """FileConfigLoader implémente ConfigLoader."""
        assert isinstance(self.loader, ConfigLoader)

    def test_load_toml_sans_schema(self, tmp_path):
        """Sans schema, load() retourne un dict brut."""
        path = tmp_path / "config.toml"
        path.write_text(TOML_CONFIG)

        data = self.loader.load(path)

        assert isinstance(data, dict)
        assert data["environment"] == {"LANG": "C", "TZ": "UTC"}

    def test_load_json_avec_schema(self, tmp_path):
        """Avec schema, load() retourne une instance du modèle."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"mirror_stderr": True}))

        config = self.loader.load(str(path), schema=CommanderConfig)

        assert isinstance(config, CommanderConfig)
        assert config.mirror_stderr is True

    def test_fichier_absent(self, tmp_path):
        """Un fichier absent lève FileConfigurationError."""
        with pytest.raises(FileConfigurationError, match="non trouvé"):
            self.loader.load(tmp_path / "absent.toml")

    def test_extension_non_supportee(self, tmp_path):
        """Une extension inconnue lève ConfigurationError."""
        path = tmp_path / "config.yaml"
        path.write_text("a: 1")
        with pytest.raises(ConfigurationError, match="non supportée"):
            self.loader.load(path)

    def test_toml_invalide(self, tmp_path):
        """Un TOML invalide lève FileConfigurationError."""
        path = tmp_path / "config.toml"
        path.write_text("environment = [")
        with pytest.raises(FileConfigurationError):
            self.loader.load(path)

    def test_json_invalide(self, tmp_path):
        """Un JSON invalide lève FileConfigurationError."""
        path = tmp_path / "config.json"
        path.write_text("{")
        with pytest.raises(FileConfigurationError):
            self.loader.load(path)

    def test_schema_non_pydantic(self, tmp_path):
        """Un schema qui n'est pas un BaseModel lève TypeError."""
        path = tmp_path / "config.json"
        path.write_text("{}")
        with pytest.raises(TypeError):
            self.loader.load(path, schema=dict)


class TestLoadConfig:
    """Tests pour load_config()."""

    def test_load_toml(self, tmp_path):
        """Un fichier TOML complet est validé."""
        path = tmp_path / "commander.toml"
        path.write_text(TOML_CONFIG)

        config = load_config(path)

        assert config.environment == {"LANG": "C", "TZ": "UTC"}
        assert config.include_global_environment is False
        assert config.working_directory == "/srv"
        assert config.mirror_stdout is True
        assert config.mirror_stderr is False
        assert config.dry_run is True
        assert config.logging.level == "DEBUG"
        assert config.logging.file == "/var/log/commander.log"

    def test_champ_inconnu(self, tmp_path):
        """Un champ inconnu est refusé."""
        path = tmp_path / "commander.json"
        path.write_text(json.dumps({"timeout": 5}))
        with pytest.raises(PydanticValidationError):
            load_config(path)

    def test_chargeur_injecte(self):
        """Le chargeur injecté est utilisé avec le schema attendu."""
        loader = MagicMock(spec=ConfigLoader)
        loader.load.return_value = CommanderConfig()

        config = load_config("commander.toml", loader=loader)

        assert config == CommanderConfig()
        loader.load.assert_called_once_with(
            "commander.toml", schema=CommanderConfig
        )


class TestModels:
    """Tests pour les modèles Pydantic."""

    def test_valeurs_par_defaut(self):
        """Test des valeurs par défaut de CommanderConfig."""
        config = CommanderConfig()
        assert config.environment == {}
        assert config.include_global_environment is True
        assert config.working_directory == ""
        assert config.dry_run is False
        assert config.logging == LoggingConfig()

    def test_niveau_normalise(self):
        """Le niveau de log est normalisé en majuscules."""
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_niveau_inconnu(self):
        """Un niveau de log inconnu est refusé."""
        with pytest.raises(PydanticValidationError):
            LoggingConfig(level="bavard")

    def test_environnement_non_textuel(self):
        """Les valeurs d'environnement doivent être des chaînes."""
        with pytest.raises(PydanticValidationError):
            CommanderConfig(environment={"A": ["x"]})
