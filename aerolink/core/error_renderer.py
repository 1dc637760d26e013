"""
AEROLINK - Error Renderer

Rendu lisible d'une erreur (titre + détails + conseil).
Aide de présentation uniquement: l'exception reste la valeur de référence.
"""

from typing import Optional

from pydantic import BaseModel

from ..logging.interfaces import IStructuredLogger
from .errors import AeroError, ErrorKind


class ErrorReport(BaseModel):
    """Rapport d'erreur prêt à afficher."""

    kind: ErrorKind
    title: str
    details: str
    hint: str


DEFAULT_TITLES = {
    ErrorKind.MISSING_REQUIRED_CREDENTIAL: "Missing Credential",
    ErrorKind.MISSING_REQUIRED_CONFIG: "Missing Configuration",
    ErrorKind.INVALID_EDITION: "Invalid Edition",
    ErrorKind.CONNECTION_FAILED: "Connection Failed",
    ErrorKind.OPERATION_UNSUPPORTED: "Operation Unsupported",
    ErrorKind.TLS_UNAVAILABLE: "TLS Unavailable",
}

DEFAULT_HINTS = {
    ErrorKind.MISSING_REQUIRED_CREDENTIAL: (
        "Provide both halves of the user credential pair, or neither"
    ),
    ErrorKind.MISSING_REQUIRED_CONFIG: (
        "Check that the endpoint hosts are set and numeric values are unsigned integers"
    ),
    ErrorKind.INVALID_EDITION: "Use exactly 'community' or 'enterprise'",
    ErrorKind.CONNECTION_FAILED: (
        "Check that the cluster is running and that no firewall blocks the port"
    ),
    ErrorKind.OPERATION_UNSUPPORTED: "Call connect() before issuing commands",
    ErrorKind.TLS_UNAVAILABLE: (
        "Provide CA, certificate and key paths, or disable TLS for this endpoint"
    ),
}

SEPARATOR = "═" * 62


def build_error_report(
    error: AeroError,
    title: Optional[str] = None,
    hint: Optional[str] = None,
) -> ErrorReport:
    """
    Construit un ErrorReport avec titre et conseil par défaut selon le type.

    Args:
        error: Erreur à présenter
        title: Titre explicite (sinon titre par défaut du type)
        hint: Conseil explicite (sinon conseil par défaut du type)
    """
    return ErrorReport(
        kind=error.kind,
        title=title or DEFAULT_TITLES[error.kind],
        details=error.detail or str(error),
        hint=hint or DEFAULT_HINTS[error.kind],
    )


def render_error(
    logger: IStructuredLogger,
    error: AeroError,
    title: Optional[str] = None,
    hint: Optional[str] = None,
) -> str:
    """
    Log le titre en ERROR et retourne le rendu multi-lignes.

    Titre, détails et conseil passent tous par la redaction du logger.

    Returns:
        Texte multi-lignes (titre, Details, Hint)
    """
    report = build_error_report(error, title=title, hint=hint)
    safe_title = logger.sanitize(report.title)
    logger.error("error", safe_title, kind=report.kind.value)

    lines = [
        f"╔ {safe_title}",
        f"║ Details: {logger.sanitize(report.details)}",
        f"║ Hint   : {logger.sanitize(report.hint)}",
        f"╚{SEPARATOR}",
    ]
    return "\n".join(lines)
