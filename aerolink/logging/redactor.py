"""
AEROLINK - Logging - Redactor

Redaction des messages contenant des données sensibles.
"""

from typing import Any, Dict, List, Optional

from .interfaces import IRedactor


class Redactor(IRedactor):
    """
    Redaction wholesale des messages sensibles.

    Example:
        redactor = Redactor()
        redactor.sanitize("login password=hunter2")  # "[REDACTED]"
        redactor.sanitize("connected to 10.0.0.1")   # inchangé
    """

    def __init__(self, additional_keywords: Optional[List[str]] = None) -> None:
        """
        Args:
            additional_keywords: Mots-clés supplémentaires
        """
        self._keywords: List[str] = [k.lower() for k in self.SENSITIVE_KEYWORDS]
        if additional_keywords:
            for keyword in additional_keywords:
                if keyword and keyword.lower() not in self._keywords:
                    self._keywords.append(keyword.lower())

    @property
    def keywords(self) -> List[str]:
        """Retourne les mots-clés configurés."""
        return list(self._keywords)

    def contains_sensitive(self, text: str) -> bool:
        """
        Vérifie la présence d'un mot-clé sensible.

        Args:
            text: Texte à analyser

        Returns:
            True si au moins un mot-clé apparaît (case-insensitive)
        """
        if not text:
            return False

        lowered = text.lower()
        return any(keyword in lowered for keyword in self._keywords)

    def sanitize(self, text: str) -> str:
        """
        Remplace le texte en entier par le marqueur si sensible.

        Idempotent: le marqueur lui-même ne contient aucun mot-clé.
        """
        if self.contains_sensitive(text):
            return self.REDACTED_MARKER
        return text

    def mask(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Masque récursivement un dictionnaire.

        Comportement:
            - Clés sensibles → valeur remplacée par le marqueur
            - Valeurs str → sanitize
            - Valeurs dict/list → récursion

        Args:
            data: Dictionnaire à masquer

        Returns:
            Copie masquée
        """
        if not isinstance(data, dict):
            return data

        result: Dict[str, Any] = {}
        for key, value in data.items():
            if self.contains_sensitive(str(key)):
                result[key] = self.REDACTED_MARKER
            else:
                result[key] = self._mask_value(value)
        return result

    def _mask_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.mask(value)
        if isinstance(value, (list, tuple)):
            return [self._mask_value(item) for item in value]
        if isinstance(value, str):
            return self.sanitize(value)
        return value

    def add_keyword(self, keyword: str) -> None:
        """
        Ajoute un mot-clé sensible.

        Raises:
            ValueError: Si mot-clé vide
        """
        if not keyword or not keyword.strip():
            raise ValueError("Keyword cannot be empty")

        keyword_lower = keyword.lower()
        if keyword_lower not in self._keywords:
            self._keywords.append(keyword_lower)
