"""
AEROLINK - Client - Interfaces

États du client et contrat public.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..config.endpoint import EndpointDescriptor


class ClientState(Enum):
    """
    États de la machine de failover.

    UNCONNECTED → CONNECTING_ACTIVE → CONNECTED_ACTIVE
                                    | CONNECTING_PASSIVE → CONNECTED_PASSIVE
                                                         | FAILED
    """

    UNCONNECTED = "unconnected"
    CONNECTING_ACTIVE = "connecting_active"
    CONNECTED_ACTIVE = "connected_active"
    CONNECTING_PASSIVE = "connecting_passive"
    CONNECTED_PASSIVE = "connected_passive"
    FAILED = "failed"

    @property
    def is_connected(self) -> bool:
        return self in (ClientState.CONNECTED_ACTIVE, ClientState.CONNECTED_PASSIVE)


class IClient(ABC):
    """Interface client cluster."""

    @abstractmethod
    def connect(self) -> EndpointDescriptor:
        """
        Connecte l'endpoint actif, bascule sur le passif en cas d'échec.

        Returns:
            Endpoint sélectionné

        Raises:
            ConnectionFailedError: Si toutes les tentatives échouent
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """
        Envoie "statistics" à l'endpoint sélectionné.

        Returns:
            True si réponse non vide, False si vide

        Raises:
            OperationUnsupportedError: Si pas connecté
            ConnectionFailedError: Échec transport
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Libère la session. Idempotent."""
        pass
