"""
AEROLINK - Logging - Structured Logger

Logger JSON structuré, injecté explicitement dans le client
(pas d'état de logging global au processus).
"""

import sys
import uuid
from collections import deque
from datetime import datetime, timezone
from typing import Any, Callable, Deque, Dict, List, Optional

from .interfaces import (
    IRedactor,
    IStructuredLogger,
    LogConfig,
    LogEntry,
    LogLevel,
)
from .redactor import Redactor


class InvalidLogLevelError(Exception):
    """Niveau de log invalide."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}")


def _stderr_handler(line: str) -> None:
    print(line, file=sys.stderr)


class StructuredLogger(IStructuredLogger):
    """
    Logger JSON structuré avec redaction.

    Chaque message passe par le prédicat de redaction avant d'être
    stocké ou émis, sans exception. Les données extra sont masquées par
    clé (désactivable via mask_extra). Seules les max_entries dernières
    entrées sont conservées en mémoire.

    Example:
        logger = StructuredLogger("aerolink", LogConfig(min_level=LogLevel.DEBUG))
        logger.info("client", "Connected to cluster", endpoint="10.0.0.1:3000")
    """

    def __init__(
        self,
        name: str,
        config: Optional[LogConfig] = None,
        redactor: Optional[IRedactor] = None,
        output_handler: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Initialise le logger structuré.

        Args:
            name: Nom du logger
            config: Configuration optionnelle
            redactor: Redactor pour messages sensibles
            output_handler: Handler de sortie (stderr par défaut)

        Raises:
            ValueError: Si name vide
        """
        if not name or not name.strip():
            raise ValueError("Logger name cannot be empty")

        self._name = name.strip()
        self._config = config or LogConfig()
        self._redactor = redactor or Redactor()
        self._output_handler = output_handler or _stderr_handler
        self._entries: Deque[LogEntry] = deque(maxlen=self._config.max_entries)
        self._correlation_id = self._config.correlation_id or str(uuid.uuid4())

    @property
    def name(self) -> str:
        """Retourne le nom du logger."""
        return self._name

    @property
    def config(self) -> LogConfig:
        """Retourne la configuration."""
        return self._config

    @property
    def correlation_id(self) -> str:
        """Retourne l'ID de corrélation de ce logger."""
        return self._correlation_id

    def sanitize(self, text: str) -> str:
        """Applique le prédicat de redaction."""
        return self._redactor.sanitize(text)

    def log(
        self,
        level: LogLevel,
        module: str,
        message: str,
        **extra: Any,
    ) -> Optional[LogEntry]:
        """
        Crée un log structuré.

        Processus:
            1. Vérifie niveau >= min_level
            2. Redacte le message
            3. Masque les données extra
            4. Stocke et émet le JSON

        Raises:
            InvalidLogLevelError: Si level n'est pas un niveau émettable
        """
        if not isinstance(level, LogLevel) or level == LogLevel.OFF:
            raise InvalidLogLevelError(level)

        if not self._should_log(level):
            return None

        masked_extra: Dict[str, Any] = {}
        if extra and self._config.include_extra:
            if self._config.mask_extra:
                masked_extra = self._redactor.mask(dict(extra))
            else:
                masked_extra = dict(extra)

        entry = LogEntry(
            timestamp=self._generate_timestamp(),
            level=level,
            module=module,
            message=self.sanitize(message),
            correlation_id=self._correlation_id,
            extra=masked_extra,
            logger_name=self._name,
        )

        self._entries.append(entry)
        self._output_handler(entry.to_json())
        return entry

    def _generate_timestamp(self) -> str:
        """Format: 2024-12-04T14:30:00.123Z"""
        now = datetime.now(timezone.utc)
        return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"

    def _should_log(self, level: LogLevel) -> bool:
        return LogLevel.get_priority(level) >= LogLevel.get_priority(
            self._config.min_level
        )

    def trace(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau TRACE."""
        return self.log(LogLevel.TRACE, module, message, **extra)

    def debug(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau DEBUG."""
        return self.log(LogLevel.DEBUG, module, message, **extra)

    def info(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau INFO."""
        return self.log(LogLevel.INFO, module, message, **extra)

    def warn(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau WARN."""
        return self.log(LogLevel.WARN, module, message, **extra)

    def error(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau ERROR."""
        return self.log(LogLevel.ERROR, module, message, **extra)

    def get_entries(self) -> List[LogEntry]:
        """Retourne les entrées capturées."""
        return list(self._entries)

    def clear_entries(self) -> None:
        """Efface les entrées capturées."""
        self._entries.clear()

    def get_entries_by_level(self, level: LogLevel) -> List[LogEntry]:
        """Filtre les entrées par niveau."""
        return [e for e in self._entries if e.level == level]

    def get_entries_by_module(self, module: str) -> List[LogEntry]:
        """Filtre les entrées par module."""
        return [e for e in self._entries if e.module == module]


def null_logger() -> StructuredLogger:
    """Logger silencieux (seuil OFF), utilisé quand aucun logger n'est injecté."""
    return StructuredLogger(
        "aerolink",
        config=LogConfig(min_level=LogLevel.OFF),
        output_handler=lambda line: None,
    )
