"""
Entités utilisateur.

Entités représentant l'identité authentifiée, le profil persisté dans le
stockage de documents et la vue de profil restituée à la présentation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class Identity:
    """
    Identité authentifiée émise par le service d'identité.

    Immuable du point de vue de l'application : elle est obtenue à
    l'inscription ou à la connexion et transmise explicitement aux flux
    qui en ont besoin (lecture de profil).

    Attributs :
        uid : Identifiant opaque, utilisé comme clé du document de profil
        email : Adresse email associée au compte
    """

    uid: str
    email: str


@dataclass
class UserProfile:
    """
    Profil utilisateur stocké sous Users/{uid}.

    Créé une seule fois à l'inscription, jamais modifié ni supprimé ensuite.

    Attributs :
        name : Nom saisi à l'inscription
        email : Email saisi à l'inscription
        registration_date : Date d'inscription au format jj-mm-aaaa (horloge locale)
    """

    name: str
    email: str
    registration_date: Optional[str] = None

    def to_document(self) -> dict[str, Any]:
        """Sérialise le profil avec les noms de champs du document stocké."""
        return {
            "name": self.name,
            "email": self.email,
            "registrationDate": self.registration_date,
        }

    @classmethod
    def from_document(cls, document: Any) -> Optional["UserProfile"]:
        """
        Désérialise un document lu depuis le stockage.

        Les champs manquants sont laissés vides, comme le ferait le SDK.

        Args :
            document : Valeur brute lue (dict attendu)

        Retourne :
            Le profil, ou None si le document est absent, vide ou n'est pas un objet
        """
        if not isinstance(document, dict) or not document:
            return None
        return cls(
            name=document.get("name") or "",
            email=document.get("email") or "",
            registration_date=document.get("registrationDate"),
        )


@dataclass(frozen=True)
class ProfileView:
    """Nom et email affichés sur l'écran d'accueil."""

    name: str
    email: str


class ProfileStatus(Enum):
    """Nature du résultat d'une lecture de profil."""

    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ProfileLoad:
    """
    Résultat terminal d'une lecture de profil.

    Attributs :
        status : Profil chargé, absent (vue de repli) ou lecture en échec
        view : Vue à afficher, None si la lecture a échoué
        notice : Message non bloquant à signaler à l'utilisateur, le cas échéant
    """

    status: ProfileStatus
    view: Optional[ProfileView] = None
    notice: Optional[str] = None

    @property
    def has_view(self) -> bool:
        """Vérifie si une vue de profil peut être affichée."""
        return self.view is not None
