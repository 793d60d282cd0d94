"""
Interface port pour le stockage de documents.

Stockage clé/valeur sans schéma, organisé en collections
(ex: Users/{uid}). L'implémentation concrète est FirebaseRealtimeDatabase.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IDocumentStore(ABC):
    """
    Interface du stockage de documents.

    Les opérations en échec lèvent DocumentStoreError avec le message du service.
    """

    @abstractmethod
    async def write_document(
        self, collection: str, key: str, value: dict[str, Any]
    ) -> None:
        """Écrit (remplace) le document collection/key."""
        ...

    @abstractmethod
    async def read_document_once(
        self, collection: str, key: str
    ) -> Optional[Any]:
        """
        Lit une seule fois le document collection/key (pas d'abonnement).

        Retourne :
            La valeur brute du document, ou None s'il n'existe pas
        """
        ...
