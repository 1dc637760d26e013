"""
AEROLINK - Erreurs

Taxonomie fermée des erreurs de la couche de connectivité cluster.

Règles de propagation:
    - Erreurs de validation (config, credentials, édition, TLS) levées
      au moment de la construction de la configuration, jamais au connect
    - ConnectionFailedError est la seule erreur produite au connect/ping
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Types d'erreurs possibles (ensemble fermé)."""

    MISSING_REQUIRED_CREDENTIAL = "missing_required_credential"
    MISSING_REQUIRED_CONFIG = "missing_required_config"
    INVALID_EDITION = "invalid_edition"
    CONNECTION_FAILED = "connection_failed"
    OPERATION_UNSUPPORTED = "operation_unsupported"
    TLS_UNAVAILABLE = "tls_unavailable"


class AeroError(Exception):
    """Erreur de base, porte un ErrorKind."""

    kind: ErrorKind

    def __init__(self, detail: str = "", key: Optional[str] = None) -> None:
        self.detail = detail
        self.key = key
        message = f"{self.kind.value}: {detail}" if detail else self.kind.value
        super().__init__(message)


class MissingRequiredCredentialError(AeroError):
    """Utilisateur et mot de passe incohérents ou illisibles."""

    kind = ErrorKind.MISSING_REQUIRED_CREDENTIAL


class MissingRequiredConfigError(AeroError):
    """Clé de configuration absente ou malformée."""

    kind = ErrorKind.MISSING_REQUIRED_CONFIG


class InvalidEditionError(AeroError):
    """Édition hors de {community, enterprise}."""

    kind = ErrorKind.INVALID_EDITION


class ConnectionFailedError(AeroError):
    """Échec de connexion ou d'échange avec le cluster."""

    kind = ErrorKind.CONNECTION_FAILED

    def __init__(
        self,
        detail: str = "",
        key: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        self.address = address
        super().__init__(detail, key=key)


class OperationUnsupportedError(AeroError):
    """Opération non disponible dans l'état courant."""

    kind = ErrorKind.OPERATION_UNSUPPORTED


class TLSUnavailableError(AeroError):
    """TLS activé mais matériel incomplet."""

    kind = ErrorKind.TLS_UNAVAILABLE


ERROR_TYPES = {
    ErrorKind.MISSING_REQUIRED_CREDENTIAL: MissingRequiredCredentialError,
    ErrorKind.MISSING_REQUIRED_CONFIG: MissingRequiredConfigError,
    ErrorKind.INVALID_EDITION: InvalidEditionError,
    ErrorKind.CONNECTION_FAILED: ConnectionFailedError,
    ErrorKind.OPERATION_UNSUPPORTED: OperationUnsupportedError,
    ErrorKind.TLS_UNAVAILABLE: TLSUnavailableError,
}
