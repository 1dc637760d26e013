"""
AEROLINK - Logging - Interfaces

Interfaces pour logging structuré avec redaction des messages sensibles.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LogLevel(Enum):
    """
    Niveaux de log.

    Ordre de sévérité: TRACE < DEBUG < INFO < WARN < ERROR.
    OFF n'est utilisable que comme seuil (désactive toute sortie).
    """

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    OFF = "OFF"

    @classmethod
    def get_priority(cls, level: "LogLevel") -> int:
        """Retourne la priorité du niveau (plus haut = plus sévère)."""
        priorities = {
            cls.TRACE: 0,
            cls.DEBUG: 1,
            cls.INFO: 2,
            cls.WARN: 3,
            cls.ERROR: 4,
            cls.OFF: 5,
        }
        return priorities.get(level, 0)


@dataclass
class LogEntry:
    """Entrée de log structurée. Le message est déjà redacté."""

    timestamp: str  # ISO 8601 UTC
    level: LogLevel
    module: str
    message: str
    correlation_id: str
    extra: Dict[str, Any] = field(default_factory=dict)
    logger_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convertit en dictionnaire."""
        result = {
            "timestamp": self.timestamp,
            "level": self.level.value,
            "module": self.module,
            "correlation_id": self.correlation_id,
            "message": self.message,
        }
        if self.logger_name:
            result["logger"] = self.logger_name
        if self.extra:
            result["extra"] = self.extra
        return result

    def to_json(self) -> str:
        """Convertit en JSON structuré."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


@dataclass
class LogConfig:
    """
    Configuration du logger structuré.

    La redaction des messages n'est pas configurable.

    Attributes:
        mask_extra: Masque les clés sensibles des données extra
        max_entries: Entrées conservées pour inspection (None: illimité)
    """

    min_level: LogLevel = LogLevel.INFO
    include_extra: bool = True
    mask_extra: bool = True
    max_entries: Optional[int] = 1000
    correlation_id: Optional[str] = None


class IRedactor(ABC):
    """
    Interface de redaction.

    Un message suspect est remplacé en entier par REDACTED_MARKER,
    jamais masqué partiellement.
    """

    SENSITIVE_KEYWORDS: List[str] = [
        "password",
        "passwd",
        "pwd",
        "secret",
        "token",
        "bearer ",
        "authorization:",
        "x-api-key",
        "api_key",
        "apikey",
        "secret_access_key",
        "private_key",
        "-----begin",
    ]

    REDACTED_MARKER: str = "[REDACTED]"

    @abstractmethod
    def contains_sensitive(self, text: str) -> bool:
        """Vrai si le texte contient un mot-clé sensible (case-insensitive)."""
        pass

    @abstractmethod
    def sanitize(self, text: str) -> str:
        """Retourne REDACTED_MARKER si sensible, sinon le texte inchangé."""
        pass

    @abstractmethod
    def mask(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Masque récursivement les valeurs des clés sensibles."""
        pass


class IStructuredLogger(ABC):
    """Interface logger structuré injecté dans les composants."""

    @abstractmethod
    def log(
        self,
        level: LogLevel,
        module: str,
        message: str,
        **extra: Any,
    ) -> Optional[LogEntry]:
        """
        Log structuré.

        Args:
            level: Niveau de log
            module: Label court du module émetteur
            message: Message (redacté avant stockage)
            **extra: Données supplémentaires (masquées)

        Returns:
            LogEntry créé ou None si filtré par niveau
        """
        pass

    @abstractmethod
    def trace(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau TRACE."""
        pass

    @abstractmethod
    def debug(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau DEBUG."""
        pass

    @abstractmethod
    def info(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau INFO."""
        pass

    @abstractmethod
    def warn(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau WARN."""
        pass

    @abstractmethod
    def error(self, module: str, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau ERROR."""
        pass

    @abstractmethod
    def sanitize(self, text: str) -> str:
        """Applique le prédicat de redaction du logger."""
        pass

    @abstractmethod
    def get_entries(self) -> List[LogEntry]:
        """Retourne les entrées de log capturées."""
        pass
