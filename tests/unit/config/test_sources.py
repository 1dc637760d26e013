"""
Tests unitaires pour Config - Sources de configuration et de secrets
"""

from pathlib import Path

import pytest

from aerolink.config import (
    EnvConfigSource,
    FileSecretsSource,
    MappingConfigSource,
    MappingSecretsSource,
    SecretsSourceError,
    YamlConfigSource,
)
from aerolink.core import MissingRequiredConfigError


class TestEnvConfigSource:
    """Source environnement."""

    def test_namespace_prefix(self) -> None:
        """ACTIVE_HOSTS lu sous AERO_ACTIVE_HOSTS."""
        source = EnvConfigSource({"AERO_ACTIVE_HOSTS": "h1,h2", "ACTIVE_HOSTS": "other"})
        assert source.get("ACTIVE_HOSTS") == "h1,h2"

    def test_custom_namespace(self) -> None:
        """Namespace personnalisé."""
        source = EnvConfigSource({"DB_EDITION": "community"}, namespace="DB")
        assert source.get("EDITION") == "community"

    def test_empty_namespace(self) -> None:
        """Namespace vide: clé brute."""
        source = EnvConfigSource({"EDITION": "community"}, namespace="")
        assert source.env_key("EDITION") == "EDITION"
        assert source.get("EDITION") == "community"

    def test_absent_is_none(self) -> None:
        """Clé absente → None."""
        assert EnvConfigSource({}).get("EDITION") is None

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """os.environ par défaut."""
        monkeypatch.setenv("AERO_EDITION", "enterprise")
        assert EnvConfigSource().get("EDITION") == "enterprise"


class TestMappingConfigSource:
    """Source en mémoire."""

    def test_values_rendered_as_strings(self) -> None:
        """Entiers, booléens et listes rendus en texte."""
        source = MappingConfigSource(
            {"ACTIVE_PORT": 3000, "ACTIVE_TLS_ENABLE": True, "ACTIVE_HOSTS": ["a", "b"]}
        )
        assert source.get("ACTIVE_PORT") == "3000"
        assert source.get("ACTIVE_TLS_ENABLE") == "true"
        assert source.get("ACTIVE_HOSTS") == "a,b"

    def test_none_values_dropped(self) -> None:
        """None équivaut à absent."""
        assert MappingConfigSource({"EDITION": None}).get("EDITION") is None


class TestYamlConfigSource:
    """Source fichier YAML."""

    def test_nested_flattened(self, tmp_path: Path) -> None:
        """Mappings imbriqués aplatis et mis en majuscules."""
        path = tmp_path / "aero.yaml"
        path.write_text(
            "edition: enterprise\n"
            "active:\n"
            "  hosts: [10.0.0.1, 10.0.0.2]\n"
            "  port: 4000\n"
            "  tls:\n"
            "    enable: false\n"
            "passive:\n"
            "  hosts: 10.1.0.1\n",
            encoding="utf-8",
        )
        source = YamlConfigSource(path)

        assert source.get("EDITION") == "enterprise"
        assert source.get("ACTIVE_HOSTS") == "10.0.0.1,10.0.0.2"
        assert source.get("ACTIVE_PORT") == "4000"
        assert source.get("ACTIVE_TLS_ENABLE") == "false"
        assert source.get("PASSIVE_HOSTS") == "10.1.0.1"
        assert source.get("PASSIVE_PORT") is None

    def test_empty_document(self, tmp_path: Path) -> None:
        """Document vide → aucune clé."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert YamlConfigSource(path).get("EDITION") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """Fichier absent → MissingRequiredConfigError."""
        with pytest.raises(MissingRequiredConfigError) as exc_info:
            YamlConfigSource(tmp_path / "absent.yaml")
        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """YAML invalide → MissingRequiredConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("active: [unclosed\n", encoding="utf-8")
        with pytest.raises(MissingRequiredConfigError):
            YamlConfigSource(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        """Document non-mapping → MissingRequiredConfigError."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(MissingRequiredConfigError):
            YamlConfigSource(path)


class TestFileSecretsSource:
    """Fichier de secrets clé=valeur."""

    def test_parse(self, tmp_path: Path) -> None:
        """Commentaires, lignes vides, quotes et espaces."""
        path = tmp_path / "secrets.env"
        path.write_text(
            "# cluster credentials\n"
            "\n"
            "AUTH_USER = admin\n"
            "AUTH_PASSWORD=\"p=ss word\"\n"
            "OTHER='x'\n",
            encoding="utf-8",
        )
        secrets = FileSecretsSource(path)

        assert secrets.lookup("AUTH_USER") == "admin"
        assert secrets.lookup("AUTH_PASSWORD") == "p=ss word"
        assert secrets.lookup("OTHER") == "x"
        assert secrets.lookup("ABSENT") is None

    def test_lazy_parse(self, tmp_path: Path) -> None:
        """Fichier lu seulement à la première lecture."""
        secrets = FileSecretsSource(tmp_path / "later.env")
        (tmp_path / "later.env").write_text("K=v\n", encoding="utf-8")
        assert secrets.lookup("K") == "v"

    def test_malformed_line_number_only(self, tmp_path: Path) -> None:
        """Erreur cite la ligne, pas son contenu."""
        path = tmp_path / "secrets.env"
        path.write_text("AUTH_USER=admin\nhunter2\n", encoding="utf-8")

        with pytest.raises(SecretsSourceError) as exc_info:
            FileSecretsSource(path).lookup("AUTH_USER")
        assert "line 2" in str(exc_info.value)
        assert "hunter2" not in str(exc_info.value)

    def test_empty_key(self, tmp_path: Path) -> None:
        """Clé vide → SecretsSourceError."""
        path = tmp_path / "secrets.env"
        path.write_text("=value\n", encoding="utf-8")
        with pytest.raises(SecretsSourceError):
            FileSecretsSource(path).lookup("X")

    def test_unreadable(self, tmp_path: Path) -> None:
        """Fichier absent → SecretsSourceError."""
        with pytest.raises(SecretsSourceError):
            FileSecretsSource(tmp_path / "absent.env").lookup("X")

    def test_mapping_secrets(self) -> None:
        """Source en mémoire."""
        assert MappingSecretsSource({"A": "1"}).lookup("A") == "1"
        assert MappingSecretsSource().lookup("A") is None
