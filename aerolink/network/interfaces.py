"""
AEROLINK - Network - Interfaces

Contrat du transport info: un dial, une écriture, une lecture complète,
une fermeture.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.endpoint import EndpointDescriptor, TLSBundle

LINE_TERMINATOR = b"\n"
READ_CHUNK_SIZE = 4096


class IInfoTransport(ABC):
    """Interface transport info (commandes administratives uniquement)."""

    @abstractmethod
    def send_info(
        self,
        host: str,
        port: int,
        command: str,
        connect_timeout_ms: int,
        read_timeout_ms: int,
        tls: Optional[TLSBundle] = None,
        server_hostname: Optional[str] = None,
    ) -> bytes:
        """
        Échange une commande contre sa réponse brute.

        Returns:
            Octets reçus jusqu'à la fermeture par le pair

        Raises:
            ConnectionFailedError: Dial, écriture, lecture ou délai dépassé
        """
        pass

    def send_info_to(self, endpoint: EndpointDescriptor, command: str) -> bytes:
        """
        Échange contre le premier host d'un endpoint.

        Un seul host est dialé par appel, sans bascule entre hosts.
        """
        return self.send_info(
            endpoint.primary_host,
            endpoint.port,
            command,
            endpoint.connect_timeout_ms,
            endpoint.read_timeout_ms,
            tls=endpoint.tls,
            server_hostname=endpoint.cluster_name,
        )
