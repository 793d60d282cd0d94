"""
Stockage persistant de la session courante.

La session (identite + jetons emis par le service d'identite) est conservee
sur disque avec diskcache, ce qui permet de retrouver l'utilisateur connecte
entre deux invocations de la CLI. Le jeton n'est jamais rafraichi.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from diskcache import Cache

from applab.core.entities.user import Identity


@dataclass(frozen=True)
class Session:
    """
    Session ouverte aupres du service d'identite.

    Attributes:
        identity: Identite authentifiee
        id_token: Jeton d'acces transmis au stockage de documents
        refresh_token: Jeton de rafraichissement (conserve, non utilise)
        expires_in: Duree de validite du jeton en secondes
    """

    identity: Identity
    id_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None


class SessionStore:
    """
    Session courante persistee avec diskcache.

    Utilise run_in_executor pour ne pas bloquer la boucle asyncio.

    Example:
        store = SessionStore(session_dir="~/.cache/applab/session")
        await store.save(session)
        current = await store.load()
        await store.clear()
    """

    SESSION_KEY = "current_session"

    def __init__(self, session_dir: str = ".cache/session") -> None:
        """
        Initialise le stockage.

        Args:
            session_dir: Repertoire du cache de session (cree au premier acces)
        """
        self._session_dir = str(session_dir)
        self._cache: Optional[Cache] = None

    def _get_cache(self) -> Cache:
        """Retourne le cache, l'ouvre si necessaire (lazy init)."""
        if self._cache is None:
            self._cache = Cache(self._session_dir)
        return self._cache

    async def load(self) -> Optional[Session]:
        """Retourne la session courante, ou None si aucune n'est ouverte."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get_cache().get, self.SESSION_KEY)

    async def save(self, session: Session) -> None:
        """Remplace la session courante."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._get_cache().set, self.SESSION_KEY, session)

    async def clear(self) -> None:
        """Supprime la session courante (sans erreur si elle est absente)."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._get_cache().delete, self.SESSION_KEY)

    def close(self) -> None:
        """Ferme la connexion au cache s'il a ete ouvert."""
        if self._cache is not None:
            self._cache.close()
            self._cache = None
