"""
Service d'authentification orchestrant les flux utilisateur.

L'AuthService enchaine les appels au service d'identite et au stockage de
documents. Chaque flux attend la fin d'une requete avant d'emettre la
suivante : il n'y a jamais deux requetes en vol simultanement.

Responsabilites:
- Inscription : validation -> creation de l'identifiant -> ecriture du profil
- Connexion : validation -> verification de l'identifiant
- Lecture du profil : lecture unique de Users/{uid}, vue de repli si absent
- Deconnexion : fermeture de la session du service d'identite

Aucun flux ne relance une requete en echec.
"""

from datetime import date
from typing import Callable

from loguru import logger

from applab.core.entities.user import (
    Identity,
    ProfileLoad,
    ProfileStatus,
    ProfileView,
    UserProfile,
)
from applab.core.exceptions import (
    AuthenticationFailed,
    DocumentStoreError,
    IdentityCreationFailed,
    IdentityServiceError,
    NotAuthenticatedError,
    ProfileWriteFailed,
)
from applab.core.ports.document_store import IDocumentStore
from applab.core.ports.identity import IIdentityService
from applab.services.validation import validate_login, validate_registration
from applab.utils.constants import FALLBACK_NAME, PROFILE_NOT_LOADED, USERS_COLLECTION
from applab.utils.helpers import format_registration_date


class AuthService:
    """
    Orchestration de l'inscription, de la connexion et du profil.

    Example:
        service = AuthService(
            identity_service=identity_client,
            document_store=database,
        )

        await service.register("Ann", "ann@example.com", "secret1")
        identity = await service.login("ann@example.com", "secret1")
        result = await service.load_profile(identity)
        await service.logout()
    """

    def __init__(
        self,
        identity_service: IIdentityService,
        document_store: IDocumentStore,
        today_fn: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialise le service.

        Args:
            identity_service: Service d'identite (creation, verification, session)
            document_store: Stockage des documents de profil
            today_fn: Source de la date locale utilisee pour la date d'inscription
        """
        self._identity = identity_service
        self._store = document_store
        self._today_fn = today_fn

    async def register(self, name: str, email: str, password: str) -> Identity:
        """
        Inscrit un nouvel utilisateur et enregistre son profil.

        Args:
            name: Nom de l'utilisateur
            email: Email du compte
            password: Mot de passe (6 caracteres minimum)

        Returns:
            L'identite creee (l'appelant enchaine sur la connexion)

        Raises:
            ValidationError: Saisie invalide (aucun appel reseau emis)
            IdentityCreationFailed: Le service d'identite a refuse la creation
            ProfileWriteFailed: Le profil n'a pas pu etre ecrit (identite conservee)
        """
        name, email, password = validate_registration(name, email, password)

        try:
            identity = await self._identity.create_credential(email, password)
        except IdentityServiceError as e:
            logger.warning("Echec de creation de l'identifiant", error=e.message)
            raise IdentityCreationFailed(e.message) from e

        profile = UserProfile(
            name=name,
            email=email,
            registration_date=format_registration_date(self._today_fn()),
        )

        try:
            await self._store.write_document(
                USERS_COLLECTION, identity.uid, profile.to_document()
            )
        except DocumentStoreError as e:
            # L'identifiant reste cree sans profil : pas de rollback
            logger.warning(
                "Echec d'ecriture du profil", uid=identity.uid, error=e.message
            )
            raise ProfileWriteFailed(e.message, uid=identity.uid) from e

        logger.info("Inscription terminee", uid=identity.uid)
        return identity

    async def login(self, email: str, password: str) -> Identity:
        """
        Connecte un utilisateur existant.

        Raises:
            ValidationError: Saisie invalide (aucun appel reseau emis)
            AuthenticationFailed: Identifiant refuse (message du service tel quel)
        """
        email, password = validate_login(email, password)

        try:
            identity = await self._identity.verify_credential(email, password)
        except IdentityServiceError as e:
            logger.warning("Echec de connexion", error=e.message)
            raise AuthenticationFailed(e.message) from e

        logger.info("Connexion reussie", uid=identity.uid)
        return identity

    async def load_profile(self, identity: Identity) -> ProfileLoad:
        """
        Lit une seule fois le profil de l'identite donnee.

        Ne leve jamais d'exception pour une erreur du stockage : le resultat
        porte alors un message a afficher et aucune vue.

        Args:
            identity: Identite obtenue par une connexion reussie

        Returns:
            ProfileLoad avec la vue stockee, la vue de repli, ou l'erreur
        """
        try:
            document = await self._store.read_document_once(
                USERS_COLLECTION, identity.uid
            )
        except DocumentStoreError as e:
            logger.warning("Echec de lecture du profil", uid=identity.uid, error=e.message)
            return ProfileLoad(status=ProfileStatus.FAILED, notice=e.message)

        profile = UserProfile.from_document(document)
        if profile is None:
            logger.info("Profil absent, vue de repli", uid=identity.uid)
            return ProfileLoad(
                status=ProfileStatus.NOT_FOUND,
                view=ProfileView(name=FALLBACK_NAME, email=identity.email),
                notice=PROFILE_NOT_LOADED,
            )

        return ProfileLoad(
            status=ProfileStatus.LOADED,
            view=ProfileView(name=profile.name, email=profile.email),
        )

    async def load_current_profile(self) -> ProfileLoad:
        """
        Lit le profil de l'identite de la session courante.

        Raises:
            NotAuthenticatedError: Aucune session ouverte
        """
        identity = await self._identity.current_identity()
        if identity is None:
            raise NotAuthenticatedError()
        return await self.load_profile(identity)

    async def logout(self) -> None:
        """Ferme la session courante. Reussit toujours."""
        await self._identity.sign_out()
        logger.info("Deconnexion")
