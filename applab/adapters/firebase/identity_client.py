"""
Client Firebase Authentication (Identity Toolkit REST API v1).

Implemente l'interface IIdentityService : creation et verification
d'identifiants email/mot de passe. Une inscription ou une connexion reussie
ouvre la session courante, conservee dans le SessionStore ; sign_out la ferme.

Usage:
    sessions = SessionStore(session_dir=".cache/session")
    client = FirebaseIdentityClient(api_key="AIza...", sessions=sessions)
    identity = await client.verify_credential("ann@example.com", "secret1")
    await client.close()

Reference API: https://cloud.google.com/identity-platform/docs/use-rest-api
"""

from typing import Optional

import httpx
from loguru import logger

from applab.adapters.firebase.responses import error_message
from applab.adapters.firebase.session_store import Session, SessionStore
from applab.core.entities.user import Identity
from applab.core.exceptions import IdentityServiceError
from applab.core.ports.identity import IIdentityService


class FirebaseIdentityClient(IIdentityService):
    """
    Client Identity Toolkit pour l'authentification email/mot de passe.

    Aucune requete n'est relancee : les erreurs du service sont remontees
    immediatement avec leur message d'origine (ex: "EMAIL_EXISTS",
    "INVALID_LOGIN_CREDENTIALS").

    Attributes:
        BASE_URL: URL par defaut de l'API Identity Toolkit v1
    """

    BASE_URL = "https://identitytoolkit.googleapis.com/v1"

    def __init__(
        self,
        api_key: Optional[str],
        sessions: SessionStore,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            api_key: Cle API Web du projet Firebase
            sessions: Stockage de la session courante
            base_url: URL de l'API (surchargee pour l'emulateur)
            timeout: Delai maximum d'une requete en secondes
        """
        self._api_key = api_key
        self._sessions = sessions
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if not self._api_key:
            raise IdentityServiceError("Firebase API key is not configured")
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params={"key": self._api_key},
                timeout=self._timeout,
            )
        return self._client

    async def create_credential(self, email: str, password: str) -> Identity:
        """Cree le compte via accounts:signUp et ouvre la session."""
        return await self._authenticate("/accounts:signUp", email, password)

    async def verify_credential(self, email: str, password: str) -> Identity:
        """Verifie l'identifiant via accounts:signInWithPassword et ouvre la session."""
        return await self._authenticate("/accounts:signInWithPassword", email, password)

    async def current_identity(self) -> Optional[Identity]:
        """Retourne l'identite de la session persistee, ou None."""
        session = await self._sessions.load()
        return session.identity if session is not None else None

    async def sign_out(self) -> None:
        """Supprime la session locale (aucun appel reseau)."""
        await self._sessions.clear()

    async def _authenticate(self, endpoint: str, email: str, password: str) -> Identity:
        """
        Envoie l'identifiant a l'endpoint donne et persiste la session obtenue.

        Args:
            endpoint: Chemin de l'endpoint Identity Toolkit
            email: Email du compte
            password: Mot de passe du compte

        Returns:
            Identite construite depuis localId et email

        Raises:
            IdentityServiceError: Reponse en erreur ou echec reseau
        """
        client = self._get_client()
        logger.debug("Requete Identity Toolkit", endpoint=endpoint)

        try:
            response = await client.post(
                endpoint,
                json={"email": email, "password": password, "returnSecureToken": True},
            )
        except httpx.HTTPError as e:
            raise IdentityServiceError(str(e) or type(e).__name__) from e

        if response.is_error:
            message = error_message(response)
            logger.debug(
                "Reponse Identity Toolkit en erreur",
                endpoint=endpoint,
                status=response.status_code,
                error=message,
            )
            raise IdentityServiceError(message)

        # Corps de succes inexploitable (page de proxy, mauvaise URL) : aucune session ouverte
        try:
            data = response.json()
            identity = Identity(uid=data["localId"], email=data.get("email") or email)
            expires_in = data.get("expiresIn")
            session = Session(
                identity=identity,
                id_token=data["idToken"],
                refresh_token=data.get("refreshToken"),
                expires_in=int(expires_in) if expires_in else None,
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.debug("Reponse Identity Toolkit illisible", endpoint=endpoint)
            raise IdentityServiceError(
                f"Unexpected Identity Toolkit response (HTTP {response.status_code})"
            ) from e

        await self._sessions.save(session)
        return identity

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
