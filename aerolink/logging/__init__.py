"""
AEROLINK: Logging

Module de logging structuré avec:
- Format JSON structuré
- Niveaux TRACE, DEBUG, INFO, WARN, ERROR (seuil OFF)
- Redaction wholesale des messages sensibles
- Logger injecté explicitement (pas d'état global)
"""

from .interfaces import (
    # Enums
    LogLevel,
    # Dataclasses
    LogEntry,
    LogConfig,
    # Interfaces
    IStructuredLogger,
    IRedactor,
)
from .redactor import (
    Redactor,
)
from .structured_logger import (
    StructuredLogger,
    null_logger,
    # Exceptions
    InvalidLogLevelError,
)

__all__ = [
    # Enums
    "LogLevel",
    # Dataclasses
    "LogEntry",
    "LogConfig",
    # Interfaces
    "IStructuredLogger",
    "IRedactor",
    # Implementations
    "Redactor",
    "StructuredLogger",
    "null_logger",
    # Exceptions
    "InvalidLogLevelError",
]
