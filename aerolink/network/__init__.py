"""
AEROLINK: Network

Transport du protocole info:
- Un dial borné par le connect timeout
- Une commande terminée par "\\n"
- Lecture jusqu'à fermeture, bornée par le read timeout
- Socket fermé sur tous les chemins
"""

from .interfaces import (
    # Interfaces
    IInfoTransport,
    # Constants
    LINE_TERMINATOR,
    READ_CHUNK_SIZE,
)
from .info_transport import InfoTransport

__all__ = [
    "IInfoTransport",
    "InfoTransport",
    "LINE_TERMINATOR",
    "READ_CHUNK_SIZE",
]
