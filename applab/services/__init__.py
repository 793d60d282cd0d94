"""
Couche application : validation des saisies et orchestration des flux.

- validation : regles locales appliquees avant tout appel reseau
- auth : AuthService (inscription, connexion, lecture de profil, deconnexion)
"""

from applab.services.auth import AuthService
from applab.services.validation import validate_login, validate_registration

__all__ = [
    "AuthService",
    "validate_login",
    "validate_registration",
]
