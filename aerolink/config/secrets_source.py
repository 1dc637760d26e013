"""
AEROLINK - Secrets Sources

Stockage de secrets clé=valeur, une entrée par ligne.
"""

from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from .interfaces import ISecretsSource


class SecretsSourceError(Exception):
    """Stockage de secrets illisible ou malformé."""

    pass


class FileSecretsSource(ISecretsSource):
    """
    Fichier de secrets au format:

        # commentaire
        AUTH_USER=admin
        AUTH_PASSWORD="s3cr3t"

    Parsé paresseusement à la première lecture. Les erreurs citent le
    numéro de ligne, jamais son contenu.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._values: Optional[Dict[str, str]] = None

    @property
    def path(self) -> Path:
        return self._path

    def lookup(self, key: str) -> Optional[str]:
        if self._values is None:
            self._values = self._parse()
        return self._values.get(key)

    def _parse(self) -> Dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise SecretsSourceError(
                f"cannot read secrets file {self._path}: {e.strerror or e}"
            ) from e

        values: Dict[str, str] = {}
        for lineno, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            key = key.strip()
            if not sep or not key:
                raise SecretsSourceError(
                    f"malformed entry at line {lineno} of {self._path}"
                )

            values[key] = _unquote(value.strip())

        return values


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


class MappingSecretsSource(ISecretsSource):
    """Secrets en mémoire (env map, doubles de test)."""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = dict(values or {})

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)
