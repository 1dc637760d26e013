"""
AEROLINK - Config Sources

Sources de configuration: environnement, map en mémoire, fichier YAML.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..core.errors import MissingRequiredConfigError
from .interfaces import IConfigSource

DEFAULT_NAMESPACE = "AERO"


def _render(value: Any) -> str:
    """Rend une valeur YAML/Python sous forme de chaîne plate."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_render(item) for item in value)
    return str(value)


class EnvConfigSource(IConfigSource):
    """
    Lecture depuis les variables d'environnement.

    La clé logique "ACTIVE_HOSTS" est lue sous "AERO_ACTIVE_HOSTS".
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        """
        Args:
            environ: Map à lire (os.environ par défaut)
            namespace: Préfixe des variables, vide pour aucun
        """
        self._environ = environ if environ is not None else os.environ
        self._namespace = namespace

    def env_key(self, key: str) -> str:
        """Retourne le nom de variable pour une clé logique."""
        if not self._namespace:
            return key
        return f"{self._namespace}_{key}"

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(self.env_key(key))


class MappingConfigSource(IConfigSource):
    """Source en mémoire (tests, configuration programmatique)."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, str] = {
            key: _render(value)
            for key, value in (values or {}).items()
            if value is not None
        }

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)


class YamlConfigSource(IConfigSource):
    """
    Chargement depuis un fichier YAML.

    Les mappings imbriqués sont aplatis avec "_" et les clés passées
    en majuscules:

        edition: community
        active:
          hosts: [10.0.0.1, 10.0.0.2]
          tls:
            enable: false

    donne EDITION, ACTIVE_HOSTS="10.0.0.1,10.0.0.2", ACTIVE_TLS_ENABLE="false".
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Raises:
            MissingRequiredConfigError: Si fichier absent, illisible
                ou document non-mapping
        """
        self._path = Path(path)
        self._values = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            raise MissingRequiredConfigError(f"config file not found: {self._path}")

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MissingRequiredConfigError(f"YAML parse error in {self._path}: {e}")
        except OSError as e:
            raise MissingRequiredConfigError(f"cannot read {self._path}: {e}")

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise MissingRequiredConfigError(
                f"config file {self._path} must contain a YAML mapping"
            )

        flat: Dict[str, str] = {}
        self._flatten(document, "", flat)
        return flat

    def _flatten(self, node: Dict[Any, Any], prefix: str, out: Dict[str, str]) -> None:
        for key, value in node.items():
            name = f"{prefix}_{key}" if prefix else str(key)
            name = name.upper()
            if isinstance(value, dict):
                self._flatten(value, name, out)
            elif value is not None:
                out[name] = _render(value)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)
