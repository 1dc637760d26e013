"""
AEROLINK - Couche de connectivité cluster

- Résolution de l'édition et de la topologie depuis la configuration
- Validation des credentials et du matériel TLS
- Connexion avec failover actif/passif
- Échange commande/réponse sur le protocole info
"""

from .core import (
    AeroError,
    ConnectionFailedError,
    Edition,
    ErrorKind,
    InvalidEditionError,
    MissingRequiredConfigError,
    MissingRequiredCredentialError,
    OperationUnsupportedError,
    TLSUnavailableError,
    render_error,
)
from .config import ClientConfig, Credentials, EndpointDescriptor, TLSBundle
from .client import Client, ClientState
from .logging import LogLevel, StructuredLogger

__version__ = "0.1.0"

__all__ = [
    "AeroError",
    "ConnectionFailedError",
    "Edition",
    "ErrorKind",
    "InvalidEditionError",
    "MissingRequiredConfigError",
    "MissingRequiredCredentialError",
    "OperationUnsupportedError",
    "TLSUnavailableError",
    "render_error",
    "ClientConfig",
    "Credentials",
    "EndpointDescriptor",
    "TLSBundle",
    "Client",
    "ClientState",
    "LogLevel",
    "StructuredLogger",
]
