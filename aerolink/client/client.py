"""
AEROLINK - Client

Orchestration du failover actif/passif.

Règles:
    - Au plus deux tentatives de dial par connect(), actif puis passif,
      strictement séquentielles
    - Sans passif configuré, l'échec actif est propagé tel quel
    - ping() ne relance jamais de failover
"""

from typing import Optional

from ..config.client_config import ClientConfig
from ..config.endpoint import EndpointDescriptor
from ..core.errors import ConnectionFailedError, OperationUnsupportedError
from ..logging.interfaces import IStructuredLogger
from ..logging.structured_logger import null_logger
from ..network.info_transport import InfoTransport
from ..network.interfaces import IInfoTransport
from .interfaces import ClientState, IClient

MODULE = "client"
PROBE_COMMAND = "build"
PING_COMMAND = "statistics"


class Client(IClient):
    """
    Client cluster avec failover actif → passif.

    Example:
        config = ClientConfig.from_env()
        with Client(config, logger=StructuredLogger("app")) as client:
            client.connect()
            healthy = client.ping()
    """

    def __init__(
        self,
        config: ClientConfig,
        logger: Optional[IStructuredLogger] = None,
        transport: Optional[IInfoTransport] = None,
    ) -> None:
        """
        Args:
            config: Configuration validée (possédée par le client)
            logger: Logger injecté (silencieux par défaut)
            transport: Transport info (InfoTransport par défaut)
        """
        self._config = config
        self._logger = logger or null_logger()
        self._transport = transport or InfoTransport(logger=self._logger)
        self._state = ClientState.UNCONNECTED
        self._selected: Optional[EndpointDescriptor] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def selected_endpoint(self) -> Optional[EndpointDescriptor]:
        """Endpoint actif ou passif retenu après connect(), sinon None."""
        return self._selected

    @property
    def is_connected(self) -> bool:
        return self._state.is_connected

    def connect(self) -> EndpointDescriptor:
        try:
            return self._connect()
        except BaseException:
            # Jamais d'état CONNECTING_* après retour de connect()
            self._selected = None
            self._state = ClientState.FAILED
            raise

    def _connect(self) -> EndpointDescriptor:
        self._selected = None
        active = self._config.active
        passive = self._config.passive

        self._state = ClientState.CONNECTING_ACTIVE
        self._logger.info(
            MODULE,
            f"connecting to active endpoint {active.address}",
            edition=self._config.edition.value,
        )
        try:
            self._transport.send_info_to(active, PROBE_COMMAND)
        except ConnectionFailedError as active_error:
            if passive is None:
                self._state = ClientState.FAILED
                self._logger.error(
                    MODULE,
                    f"active endpoint {active.address} unreachable, no passive configured",
                )
                raise

            self._logger.warn(
                MODULE,
                f"active endpoint {active.address} unreachable, failing over to "
                f"passive {passive.address}",
                reason=active_error.detail,
            )
            self._state = ClientState.CONNECTING_PASSIVE
            try:
                self._transport.send_info_to(passive, PROBE_COMMAND)
            except ConnectionFailedError:
                self._state = ClientState.FAILED
                self._logger.error(
                    MODULE, f"passive endpoint {passive.address} unreachable"
                )
                raise

            return self._select(passive, ClientState.CONNECTED_PASSIVE)

        return self._select(active, ClientState.CONNECTED_ACTIVE)

    def _select(
        self, endpoint: EndpointDescriptor, state: ClientState
    ) -> EndpointDescriptor:
        self._selected = endpoint
        self._state = state
        self._logger.info(MODULE, f"connected to {endpoint.address}", state=state.value)
        return endpoint

    def ping(self) -> bool:
        if not self._state.is_connected or self._selected is None:
            raise OperationUnsupportedError(
                f"ping requires a connected client, state is {self._state.value}"
            )

        response = self._transport.send_info_to(self._selected, PING_COMMAND)
        if not response.strip():
            self._logger.warn(
                MODULE, f"empty statistics response from {self._selected.address}"
            )
            return False

        self._logger.debug(MODULE, f"ping ok ({len(response)} bytes)")
        return True

    def close(self) -> None:
        if self._selected is None and self._state == ClientState.UNCONNECTED:
            return

        if self._selected is not None:
            self._logger.debug(MODULE, f"releasing session on {self._selected.address}")
        self._selected = None
        self._state = ClientState.UNCONNECTED

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
