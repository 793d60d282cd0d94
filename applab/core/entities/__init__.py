"""
Entités métier représentant les concepts du domaine.

Exports :
- Identity : Identité émise par le service d'identité (uid + email)
- UserProfile : Profil persisté sous Users/{uid}
- ProfileView : Nom et email affichés après connexion
- ProfileLoad : Résultat terminal d'une lecture de profil
- ProfileStatus : Nature du résultat (chargé, absent, échec)
"""

from applab.core.entities.user import (
    Identity,
    ProfileLoad,
    ProfileStatus,
    ProfileView,
    UserProfile,
)

__all__ = [
    "Identity",
    "UserProfile",
    "ProfileView",
    "ProfileLoad",
    "ProfileStatus",
]
