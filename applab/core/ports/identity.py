"""
Interface port pour le service d'identité.

Le service d'identité est le système de référence des identifiants
(email, mot de passe) et de l'identité de session. L'implémentation
concrète est FirebaseIdentityClient (Identity Toolkit REST).
"""

from abc import ABC, abstractmethod
from typing import Optional

from applab.core.entities.user import Identity


class IIdentityService(ABC):
    """
    Interface du service d'identité.

    Toutes les opérations en échec lèvent IdentityServiceError avec le
    message du service, sans classification plus fine.
    """

    @abstractmethod
    async def create_credential(self, email: str, password: str) -> Identity:
        """
        Crée un identifiant et ouvre la session correspondante.

        Args :
            email : Email du nouveau compte
            password : Mot de passe du nouveau compte

        Retourne :
            L'identité nouvellement émise
        """
        ...

    @abstractmethod
    async def verify_credential(self, email: str, password: str) -> Identity:
        """
        Vérifie un identifiant existant et ouvre la session.

        Args :
            email : Email du compte
            password : Mot de passe du compte

        Retourne :
            L'identité authentifiée
        """
        ...

    @abstractmethod
    async def current_identity(self) -> Optional[Identity]:
        """Retourne l'identité de la session courante, ou None."""
        ...

    @abstractmethod
    async def sign_out(self) -> None:
        """Invalide la session locale. Ne lève jamais d'erreur."""
        ...
