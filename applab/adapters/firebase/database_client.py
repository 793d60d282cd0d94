"""
Client Firebase Realtime Database (API REST).

Implemente l'interface IDocumentStore : un document est le noeud JSON
{collection}/{key}. Les requetes sont authentifiees avec le jeton de la
session courante (parametre auth) quand une session est ouverte.

Usage:
    database = FirebaseRealtimeDatabase(
        database_url="https://my-project-default-rtdb.firebaseio.com",
        sessions=sessions,
    )
    await database.write_document("Users", uid, {"name": "Ann"})
    document = await database.read_document_once("Users", uid)

Reference API: https://firebase.google.com/docs/reference/rest/database
"""

from typing import Any, Optional

import httpx
from loguru import logger

from applab.adapters.firebase.responses import error_message
from applab.adapters.firebase.session_store import SessionStore
from applab.core.exceptions import DocumentStoreError
from applab.core.ports.document_store import IDocumentStore


class FirebaseRealtimeDatabase(IDocumentStore):
    """
    Acces aux documents de la Realtime Database.

    - write_document : PUT /{collection}/{key}.json (remplacement complet)
    - read_document_once : GET /{collection}/{key}.json (null si absent)

    Lecture ponctuelle uniquement : aucun abonnement aux modifications.
    """

    def __init__(
        self,
        database_url: Optional[str],
        sessions: SessionStore,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            database_url: URL racine de la base (ex: https://<projet>.firebaseio.com)
            sessions: Stockage de la session courante (source du jeton auth)
            timeout: Delai maximum d'une requete en secondes
        """
        self._database_url = database_url.rstrip("/") if database_url else None
        self._sessions = sessions
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if not self._database_url:
            raise DocumentStoreError("Firebase database URL is not configured")
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._database_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def _auth_params(self) -> dict[str, str]:
        """Parametres d'authentification depuis la session courante."""
        session = await self._sessions.load()
        if session is None:
            return {}
        return {"auth": session.id_token}

    @staticmethod
    def _document_path(collection: str, key: str) -> str:
        return f"/{collection}/{key}.json"

    async def write_document(
        self, collection: str, key: str, value: dict[str, Any]
    ) -> None:
        """Ecrit le document (PUT remplace le noeud entier)."""
        await self._request("PUT", self._document_path(collection, key), json=value)

    async def read_document_once(
        self, collection: str, key: str
    ) -> Optional[Any]:
        """Lit le document une fois ; None si le noeud n'existe pas."""
        response = await self._request("GET", self._document_path(collection, key))
        try:
            return response.json()
        except ValueError as e:
            logger.debug("Reponse Realtime Database illisible", collection=collection, key=key)
            raise DocumentStoreError(
                f"Unexpected Realtime Database response (HTTP {response.status_code})"
            ) from e

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Execute une requete unique (sans retry).

        Raises:
            DocumentStoreError: Reponse en erreur ou echec reseau
        """
        client = self._get_client()
        params = await self._auth_params()
        logger.debug("Requete Realtime Database", method=method, path=path)

        try:
            response = await client.request(method, path, params=params, **kwargs)
        except httpx.HTTPError as e:
            raise DocumentStoreError(str(e) or type(e).__name__) from e

        if response.is_error:
            message = error_message(response)
            logger.debug(
                "Reponse Realtime Database en erreur",
                path=path,
                status=response.status_code,
                error=message,
            )
            raise DocumentStoreError(message)
        return response

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
