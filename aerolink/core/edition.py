"""
AEROLINK - Edition Resolver

Résolution de l'édition du cluster depuis la configuration.
La comparaison est sensible à la casse, aucune valeur par défaut implicite.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from .errors import InvalidEditionError

if TYPE_CHECKING:
    from ..config.interfaces import IConfigSource


EDITION_KEY = "EDITION"


class Edition(Enum):
    """Éditions supportées."""

    COMMUNITY = "community"
    ENTERPRISE = "enterprise"


def detect_edition(raw_value: Optional[str]) -> Edition:
    """
    Mappe une valeur brute vers une Edition.

    Args:
        raw_value: Valeur lue depuis la configuration

    Returns:
        Edition correspondante

    Raises:
        InvalidEditionError: Si valeur absente, vide ou inconnue
    """
    if raw_value is None:
        raise InvalidEditionError("edition is not set", key=EDITION_KEY)

    for edition in Edition:
        if raw_value == edition.value:
            return edition

    raise InvalidEditionError(
        f"unknown edition {raw_value!r}, expected 'community' or 'enterprise'",
        key=EDITION_KEY,
    )


def resolve_edition(source: "IConfigSource", key: str = EDITION_KEY) -> Edition:
    """
    Lit la clé d'édition (obligatoire) depuis une source.

    Raises:
        InvalidEditionError: Si clé absente ou valeur invalide
    """
    return detect_edition(source.get(key))


def resolve_edition_or_default(
    source: "IConfigSource",
    default: Edition,
    key: str = EDITION_KEY,
) -> Edition:
    """
    Comme resolve_edition, mais retourne default si la clé est absente.

    Une valeur présente mais invalide (y compris vide) échoue toujours.
    """
    raw_value = source.get(key)
    if raw_value is None:
        return default
    return detect_edition(raw_value)
