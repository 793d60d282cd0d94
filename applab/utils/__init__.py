"""
Utilitaires et constantes pour Applab.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from applab.utils.constants import (
    MIN_PASSWORD_LENGTH,
    REGISTRATION_DATE_FORMAT,
    USERS_COLLECTION,
)
from applab.utils.helpers import clean_input, format_registration_date

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "REGISTRATION_DATE_FORMAT",
    "USERS_COLLECTION",
    "clean_input",
    "format_registration_date",
]
