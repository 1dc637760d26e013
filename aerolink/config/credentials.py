"""
AEROLINK - Credential Resolver

Paire utilisateur / mot de passe optionnelle.
Les deux sont présents ou les deux absents, jamais un seul.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..core.errors import MissingRequiredCredentialError
from .interfaces import IConfigSource, ISecretsSource
from .secrets_source import SecretsSourceError

DEFAULT_PREFIX = "AUTH"


def _normalize(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class Credentials:
    """Credentials validés à la construction. Le mot de passe n'apparaît pas dans repr()."""

    user: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "user", _normalize(self.user))
        object.__setattr__(self, "password", _normalize(self.password))
        self.validate()

    def validate(self) -> None:
        """
        Raises:
            MissingRequiredCredentialError: Si exactement un des deux est défini
        """
        if self.user is not None and self.password is None:
            raise MissingRequiredCredentialError("user is set but password is missing")
        if self.password is not None and self.user is None:
            raise MissingRequiredCredentialError("password is set but user is missing")

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @classmethod
    def from_config(
        cls, source: IConfigSource, prefix: str = DEFAULT_PREFIX
    ) -> "Credentials":
        """Lit {prefix}_USER et {prefix}_PASSWORD depuis une source de configuration."""
        return cls(
            user=source.get(f"{prefix}_USER"),
            password=source.get(f"{prefix}_PASSWORD"),
        )

    @classmethod
    def from_secrets_source(
        cls, secrets: ISecretsSource, prefix: str = DEFAULT_PREFIX
    ) -> "Credentials":
        """
        Lit les credentials depuis un stockage de secrets.

        Raises:
            MissingRequiredCredentialError: Paire incohérente, ou stockage
                illisible/malformé (même type pour l'appelant)
        """
        try:
            user = secrets.lookup(f"{prefix}_USER")
            password = secrets.lookup(f"{prefix}_PASSWORD")
        except SecretsSourceError as e:
            raise MissingRequiredCredentialError(str(e)) from e

        return cls(user=user, password=password)
