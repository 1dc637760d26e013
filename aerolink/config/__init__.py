"""
AEROLINK: Configuration

- Sources de configuration (environnement, mémoire, YAML)
- Sources de secrets (fichier clé=valeur, mémoire)
- Endpoint Descriptor, Credentials, ClientConfig
"""

from .interfaces import (
    # Interfaces
    IConfigSource,
    ISecretsSource,
)
from .sources import (
    EnvConfigSource,
    MappingConfigSource,
    YamlConfigSource,
    DEFAULT_NAMESPACE,
)
from .secrets_source import (
    FileSecretsSource,
    MappingSecretsSource,
    # Exceptions
    SecretsSourceError,
)
from .endpoint import (
    # Data classes
    EndpointDescriptor,
    TLSBundle,
    # Defaults
    DEFAULT_PORT,
    DEFAULT_CONNECT_TIMEOUT_MS,
    DEFAULT_READ_TIMEOUT_MS,
    MAX_TIMEOUT_MS,
    parse_hosts,
)
from .credentials import Credentials
from .client_config import (
    ClientConfig,
    ACTIVE_PREFIX,
    PASSIVE_PREFIX,
)

__all__ = [
    # Interfaces
    "IConfigSource",
    "ISecretsSource",
    # Sources
    "EnvConfigSource",
    "MappingConfigSource",
    "YamlConfigSource",
    "DEFAULT_NAMESPACE",
    "FileSecretsSource",
    "MappingSecretsSource",
    # Data classes
    "EndpointDescriptor",
    "TLSBundle",
    "Credentials",
    "ClientConfig",
    # Constants
    "DEFAULT_PORT",
    "DEFAULT_CONNECT_TIMEOUT_MS",
    "DEFAULT_READ_TIMEOUT_MS",
    "MAX_TIMEOUT_MS",
    "ACTIVE_PREFIX",
    "PASSIVE_PREFIX",
    "parse_hosts",
    # Exceptions
    "SecretsSourceError",
]
