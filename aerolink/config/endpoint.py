"""
AEROLINK - Endpoint Descriptor

Adresse joignable d'un cluster (hosts, port, timeouts, nom, TLS).
La validation est pure: aucune I/O, aucune résolution DNS.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import MissingRequiredConfigError, TLSUnavailableError
from .interfaces import IConfigSource

DEFAULT_PORT = 3000
DEFAULT_CONNECT_TIMEOUT_MS = 5000
DEFAULT_READ_TIMEOUT_MS = 5000
MAX_PORT = 65535
MAX_TIMEOUT_MS = 2**31 - 1

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass(frozen=True)
class TLSBundle:
    """Chemins du matériel TLS (jamais lus à la validation)."""

    ca_path: str
    cert_path: str
    key_path: str


@dataclass(frozen=True)
class EndpointDescriptor:
    """
    Descripteur d'endpoint, validé dès la construction.

    Attributes:
        hosts: Liste ordonnée non vide
        port: Port TCP (défaut 3000)
        connect_timeout_ms: Borne de dial (défaut 5000)
        read_timeout_ms: Borne de lecture (défaut 5000)
        cluster_name: Nom de cluster optionnel
        tls: Bundle TLS, None si TLS désactivé
    """

    hosts: Tuple[str, ...]
    port: int = DEFAULT_PORT
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS
    cluster_name: Optional[str] = None
    tls: Optional[TLSBundle] = None

    def __post_init__(self) -> None:
        # Accepte une liste en entrée, stocke un tuple
        object.__setattr__(self, "hosts", tuple(self.hosts))
        self.validate()

    def validate(self) -> None:
        """
        Valide le descripteur.

        Raises:
            MissingRequiredConfigError: hosts vides, port ou timeouts hors bornes
            TLSUnavailableError: bundle TLS incomplet
        """
        if not self.hosts or any(not h or not h.strip() for h in self.hosts):
            raise MissingRequiredConfigError("endpoint host list is empty")

        if not 1 <= self.port <= MAX_PORT:
            raise MissingRequiredConfigError(f"port {self.port} out of range 1..{MAX_PORT}")

        for name, value in (
            ("connect", self.connect_timeout_ms),
            ("read", self.read_timeout_ms),
        ):
            if not 1 <= value <= MAX_TIMEOUT_MS:
                raise MissingRequiredConfigError(
                    f"{name} timeout {value} ms out of range 1..{MAX_TIMEOUT_MS}"
                )

        if self.tls is not None:
            for name, path in (
                ("ca", self.tls.ca_path),
                ("cert", self.tls.cert_path),
                ("key", self.tls.key_path),
            ):
                if not path or not path.strip():
                    raise TLSUnavailableError(f"TLS enabled but {name} path is missing")

    @property
    def primary_host(self) -> str:
        """Premier host listé, le seul dialé par échange."""
        return self.hosts[0]

    @property
    def address(self) -> str:
        return f"{self.primary_host}:{self.port}"

    @property
    def tls_enabled(self) -> bool:
        return self.tls is not None

    @classmethod
    def from_config(cls, source: IConfigSource, prefix: str) -> "EndpointDescriptor":
        """
        Construit et valide un descripteur depuis une source.

        Args:
            source: Source de configuration
            prefix: "ACTIVE" ou "PASSIVE"

        Raises:
            MissingRequiredConfigError: Clé manquante ou malformée
            TLSUnavailableError: TLS activé avec chemin manquant
        """
        hosts_key = f"{prefix}_HOSTS"
        hosts = parse_hosts(source.get(hosts_key))
        if not hosts:
            raise MissingRequiredConfigError(
                f"{hosts_key} is missing or empty", key=hosts_key
            )

        tls: Optional[TLSBundle] = None
        if _parse_bool(source, f"{prefix}_TLS_ENABLE"):
            tls = _read_tls_bundle(source, prefix)

        cluster_name = source.get(f"{prefix}_CLUSTER_NAME")
        if cluster_name is not None:
            cluster_name = cluster_name.strip() or None

        return cls(
            hosts=hosts,
            port=_parse_unsigned(source, f"{prefix}_PORT", DEFAULT_PORT),
            connect_timeout_ms=_parse_unsigned(
                source, f"{prefix}_CONNECT_TIMEOUT_MS", DEFAULT_CONNECT_TIMEOUT_MS
            ),
            read_timeout_ms=_parse_unsigned(
                source, f"{prefix}_READ_TIMEOUT_MS", DEFAULT_READ_TIMEOUT_MS
            ),
            cluster_name=cluster_name,
            tls=tls,
        )


def parse_hosts(raw: Optional[str]) -> Tuple[str, ...]:
    """Découpe une liste séparée par des virgules, entrées vides ignorées."""
    if raw is None:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_unsigned(source: IConfigSource, key: str, default: int) -> int:
    raw = source.get(key)
    if raw is None:
        return default

    value = raw.strip()
    if not value.isascii() or not value.isdigit():
        raise MissingRequiredConfigError(
            f"{key} must be an unsigned integer, got {raw!r}", key=key
        )
    return int(value)


def _parse_bool(source: IConfigSource, key: str) -> bool:
    raw = source.get(key)
    if raw is None:
        return False

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES or value == "":
        return False
    raise MissingRequiredConfigError(f"{key} must be a boolean, got {raw!r}", key=key)


def _read_tls_bundle(source: IConfigSource, prefix: str) -> TLSBundle:
    paths = {}
    for field_name, suffix in (("ca_path", "CA"), ("cert_path", "CERT"), ("key_path", "KEY")):
        key = f"{prefix}_TLS_{suffix}"
        value = source.get(key)
        if value is None or not value.strip():
            raise TLSUnavailableError(f"TLS enabled but {key} is missing", key=key)
        paths[field_name] = value.strip()
    return TLSBundle(**paths)
