"""
AEROLINK - Pytest Configuration
Fixtures partagées pour tous les tests.
"""

import socket
import threading
from contextlib import closing
from typing import Any, Callable, Dict, List, Optional

import pytest

from aerolink.config import MappingConfigSource
from aerolink.logging import LogConfig, LogLevel, StructuredLogger


class StubInfoServer:
    """
    Serveur info minimal sur 127.0.0.1, un thread.

    Pour chaque connexion: lit une ligne, enregistre la commande,
    répond `response` puis ferme. Si `stall` est vrai, envoie seulement
    `partial` (éventuellement vide) et garde la connexion ouverte
    jusqu'à stop().
    """

    def __init__(
        self, response: bytes = b"", stall: bool = False, partial: bytes = b""
    ) -> None:
        self.response = response
        self.stall = stall
        self.partial = partial
        self.received: List[bytes] = []
        self._stop = threading.Event()
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(8)
        self._listener.settimeout(0.05)
        self.port = self._listener.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def commands(self) -> List[str]:
        return [data.decode("utf-8").rstrip("\n") for data in self.received]

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._listener.accept()
            except socket.timeout:
                continue
            except OSError:
                return

            with conn:
                conn.settimeout(2.0)
                data = b""
                try:
                    while not data.endswith(b"\n"):
                        chunk = conn.recv(1024)
                        if not chunk:
                            break
                        data += chunk
                except OSError:
                    pass
                self.received.append(data)

                if self.stall:
                    try:
                        conn.sendall(self.partial)
                    except OSError:
                        pass
                    self._stop.wait(5.0)
                    continue

                try:
                    conn.sendall(self.response)
                except OSError:
                    pass

    def stop(self) -> None:
        self._stop.set()
        self._thread.join(timeout=2.0)
        self._listener.close()


@pytest.fixture
def info_server():
    """
    Factory de serveurs info, arrêtés en fin de test.

    Usage:
        server = info_server(response=b"ok")
    """
    servers: List[StubInfoServer] = []

    def factory(
        response: bytes = b"", stall: bool = False, partial: bytes = b""
    ) -> StubInfoServer:
        server = StubInfoServer(response=response, stall=stall, partial=partial)
        servers.append(server)
        return server

    yield factory

    for server in servers:
        server.stop()


@pytest.fixture
def closed_port() -> int:
    """Port local sans listener (connexion refusée)."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def captured_lines() -> List[str]:
    """Lignes JSON émises par le logger de test."""
    return []


@pytest.fixture
def logger(captured_lines: List[str]) -> StructuredLogger:
    """Logger niveau TRACE qui capture la sortie au lieu de stderr."""
    return StructuredLogger(
        "test",
        config=LogConfig(min_level=LogLevel.TRACE),
        output_handler=captured_lines.append,
    )


@pytest.fixture
def make_source() -> Callable[..., MappingConfigSource]:
    """
    Factory de sources de configuration en mémoire.

    Part d'une configuration minimale valide, surchargée par kwargs;
    une valeur None retire la clé.
    """

    def factory(**overrides: Any) -> MappingConfigSource:
        values: Dict[str, Optional[Any]] = {
            "EDITION": "community",
            "ACTIVE_HOSTS": "10.0.0.1",
        }
        values.update(overrides)
        return MappingConfigSource({k: v for k, v in values.items() if v is not None})

    return factory
