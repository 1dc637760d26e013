"""
AEROLINK: Core

- Taxonomie fermée des erreurs
- Résolution de l'édition (community / enterprise)
- Rendu lisible des erreurs
"""

from .errors import (
    # Enums
    ErrorKind,
    # Exceptions
    AeroError,
    MissingRequiredCredentialError,
    MissingRequiredConfigError,
    InvalidEditionError,
    ConnectionFailedError,
    OperationUnsupportedError,
    TLSUnavailableError,
    ERROR_TYPES,
)
from .edition import (
    Edition,
    EDITION_KEY,
    detect_edition,
    resolve_edition,
    resolve_edition_or_default,
)
from .error_renderer import (
    ErrorReport,
    build_error_report,
    render_error,
)

__all__ = [
    # Enums
    "ErrorKind",
    "Edition",
    # Exceptions
    "AeroError",
    "MissingRequiredCredentialError",
    "MissingRequiredConfigError",
    "InvalidEditionError",
    "ConnectionFailedError",
    "OperationUnsupportedError",
    "TLSUnavailableError",
    "ERROR_TYPES",
    # Edition
    "EDITION_KEY",
    "detect_edition",
    "resolve_edition",
    "resolve_edition_or_default",
    # Rendering
    "ErrorReport",
    "build_error_report",
    "render_error",
]
