"""
AEROLINK - Client Configuration

Agrégat édition + endpoint actif + endpoint passif optionnel + credentials.
Construit une fois, toutes les validations ont lieu ici.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.edition import Edition, resolve_edition
from ..core.errors import (
    InvalidEditionError,
    MissingRequiredConfigError,
    MissingRequiredCredentialError,
)
from .credentials import Credentials
from .endpoint import EndpointDescriptor
from .interfaces import IConfigSource, ISecretsSource
from .sources import EnvConfigSource

ACTIVE_PREFIX = "ACTIVE"
PASSIVE_PREFIX = "PASSIVE"


@dataclass(frozen=True)
class ClientConfig:
    """Unité d'injection dans le Client."""

    edition: Edition
    active: EndpointDescriptor
    passive: Optional[EndpointDescriptor] = None
    credentials: Credentials = field(default_factory=Credentials)

    def __post_init__(self) -> None:
        if not isinstance(self.edition, Edition):
            raise InvalidEditionError(f"unknown edition {self.edition!r}")
        if not isinstance(self.active, EndpointDescriptor):
            raise MissingRequiredConfigError("active endpoint is required")
        if self.passive is not None and not isinstance(self.passive, EndpointDescriptor):
            raise MissingRequiredConfigError("passive endpoint must be an EndpointDescriptor")
        if not isinstance(self.credentials, Credentials):
            raise MissingRequiredCredentialError("credentials must be a Credentials value")

    @property
    def has_passive(self) -> bool:
        return self.passive is not None

    @classmethod
    def from_source(
        cls,
        source: IConfigSource,
        secrets: Optional[ISecretsSource] = None,
    ) -> "ClientConfig":
        """
        Construit la configuration complète.

        L'endpoint passif n'est lu que si PASSIVE_HOSTS est présent;
        il est alors validé intégralement.

        Args:
            source: Source de configuration
            secrets: Stockage de secrets (sinon credentials lus dans source)

        Raises:
            InvalidEditionError, MissingRequiredConfigError,
            TLSUnavailableError, MissingRequiredCredentialError
        """
        edition = resolve_edition(source)
        active = EndpointDescriptor.from_config(source, ACTIVE_PREFIX)

        passive: Optional[EndpointDescriptor] = None
        if source.get(f"{PASSIVE_PREFIX}_HOSTS") is not None:
            passive = EndpointDescriptor.from_config(source, PASSIVE_PREFIX)

        if secrets is not None:
            credentials = Credentials.from_secrets_source(secrets)
        else:
            credentials = Credentials.from_config(source)

        return cls(
            edition=edition,
            active=active,
            passive=passive,
            credentials=credentials,
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        secrets: Optional[ISecretsSource] = None,
    ) -> "ClientConfig":
        """Raccourci: configuration depuis les variables AERO_*."""
        return cls.from_source(EnvConfigSource(environ), secrets=secrets)
