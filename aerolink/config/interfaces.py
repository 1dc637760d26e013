"""
AEROLINK - Config - Interfaces

Contrats des sources de configuration et de secrets.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IConfigSource(ABC):
    """Source de configuration clé-valeur à plat."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Lit une valeur brute.

        Args:
            key: Nom logique (ex: "ACTIVE_HOSTS")

        Returns:
            Valeur brute, ou None si la clé est absente
        """
        pass


class ISecretsSource(ABC):
    """
    Capacité de lecture de secrets.

    Le resolver de credentials ignore si le stockage est un fichier,
    une map d'environnement ou un double de test.
    """

    @abstractmethod
    def lookup(self, key: str) -> Optional[str]:
        """
        Lit un secret.

        Returns:
            Valeur, ou None si absente

        Raises:
            SecretsSourceError: Si le stockage est illisible ou malformé
        """
        pass
