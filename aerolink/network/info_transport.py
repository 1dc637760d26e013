"""
AEROLINK - Network - Info Transport

Échange commande/réponse one-shot sur le protocole info (texte, ligne).

Séquence par appel:
    1. Dial borné par connect_timeout_ms
    2. Écriture de la commande + "\\n"
    3. Lecture jusqu'à fermeture du pair, bornée par read_timeout_ms
    4. Fermeture du socket sur tous les chemins de sortie
"""

import socket
import ssl
import time
from typing import List, Optional

from ..config.endpoint import TLSBundle
from ..core.errors import ConnectionFailedError
from ..logging.interfaces import IStructuredLogger
from ..logging.structured_logger import null_logger
from .interfaces import LINE_TERMINATOR, READ_CHUNK_SIZE, IInfoTransport

MODULE = "net"


class InfoTransport(IInfoTransport):
    """
    Transport info sans état.

    Aucune connexion n'est conservée entre deux appels; aucune
    authentification n'est négociée.
    """

    def __init__(self, logger: Optional[IStructuredLogger] = None) -> None:
        """
        Args:
            logger: Logger injecté (silencieux par défaut)
        """
        self._logger = logger or null_logger()

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
        address = f"{host}:{port}"
        self._logger.trace(MODULE, f"dialing {address}", command=command)

        sock = self._dial(host, port, connect_timeout_ms, address)
        with sock:
            if tls is not None:
                sock = self._wrap_tls(sock, tls, server_hostname or host, address)
                with sock:
                    return self._exchange(sock, command, read_timeout_ms, address)
            return self._exchange(sock, command, read_timeout_ms, address)

    def _dial(
        self, host: str, port: int, connect_timeout_ms: int, address: str
    ) -> socket.socket:
        try:
            return socket.create_connection(
                (host, port), timeout=connect_timeout_ms / 1000.0
            )
        except socket.timeout:
            raise ConnectionFailedError(
                f"connect to {address} timed out after {connect_timeout_ms} ms",
                address=address,
            )
        except OSError as e:
            raise ConnectionFailedError(
                f"connect to {address} failed: {e.strerror or e}", address=address
            )

    def _wrap_tls(
        self, sock: socket.socket, tls: TLSBundle, server_hostname: str, address: str
    ) -> ssl.SSLSocket:
        try:
            context = ssl.create_default_context(cafile=tls.ca_path)
            context.load_cert_chain(certfile=tls.cert_path, keyfile=tls.key_path)
            return context.wrap_socket(sock, server_hostname=server_hostname)
        except (ssl.SSLError, OSError) as e:
            raise ConnectionFailedError(
                f"TLS handshake with {address} failed: {e}", address=address
            )

    def _exchange(
        self, sock: socket.socket, command: str, read_timeout_ms: int, address: str
    ) -> bytes:
        try:
            sock.sendall(command.encode("utf-8") + LINE_TERMINATOR)
        except OSError as e:
            raise ConnectionFailedError(
                f"write to {address} failed: {e}", address=address
            )

        deadline = time.monotonic() + read_timeout_ms / 1000.0
        chunks: List[bytes] = []
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise self._read_timeout(address, read_timeout_ms)

            sock.settimeout(remaining)
            try:
                chunk = sock.recv(READ_CHUNK_SIZE)
            except socket.timeout:
                raise self._read_timeout(address, read_timeout_ms)
            except OSError as e:
                raise ConnectionFailedError(
                    f"read from {address} failed: {e}", address=address
                )

            if not chunk:
                break
            chunks.append(chunk)

        response = b"".join(chunks)
        self._logger.trace(MODULE, f"received {len(response)} bytes from {address}")
        return response

    @staticmethod
    def _read_timeout(address: str, read_timeout_ms: int) -> ConnectionFailedError:
        return ConnectionFailedError(
            f"read from {address} timed out after {read_timeout_ms} ms",
            address=address,
        )
