"""
AEROLINK: Client

Client cluster avec:
- connect(): actif, puis passif si configuré (deux tentatives max)
- ping(): commande "statistics" sur l'endpoint sélectionné
- close(): libération idempotente
"""

from .interfaces import (
    # Enums
    ClientState,
    # Interfaces
    IClient,
)
from .client import (
    Client,
    PROBE_COMMAND,
    PING_COMMAND,
)

__all__ = [
    "ClientState",
    "IClient",
    "Client",
    "PROBE_COMMAND",
    "PING_COMMAND",
]
