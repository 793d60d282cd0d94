"""
Validation des saisies des formulaires d'inscription et de connexion.

Les regles sont evaluees dans un ordre fixe et la premiere violation
interrompt la validation : une seule erreur est remontee a la fois.

Ordre inscription : nom -> email -> mot de passe non vide -> longueur >= 6
Ordre connexion : email -> mot de passe non vide
"""

from applab.core.exceptions import ValidationError
from applab.utils.constants import (
    EMAIL_REQUIRED,
    MIN_PASSWORD_LENGTH,
    NAME_REQUIRED,
    PASSWORD_REQUIRED,
    PASSWORD_TOO_SHORT,
)
from applab.utils.helpers import clean_input


def validate_registration(name: str, email: str, password: str) -> tuple[str, str, str]:
    """
    Valide le formulaire d'inscription.

    Args:
        name: Nom saisi
        email: Email saisi
        password: Mot de passe saisi

    Returns:
        Tuple (name, email, password) nettoyes

    Raises:
        ValidationError: Premiere regle violee
    """
    name = clean_input(name)
    email = clean_input(email)
    password = clean_input(password)

    if not name:
        raise ValidationError("name", NAME_REQUIRED)
    if not email:
        raise ValidationError("email", EMAIL_REQUIRED)
    if not password:
        raise ValidationError("password", PASSWORD_REQUIRED)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("password", PASSWORD_TOO_SHORT)

    return name, email, password


def validate_login(email: str, password: str) -> tuple[str, str]:
    """
    Valide le formulaire de connexion.

    Returns:
        Tuple (email, password) nettoyes

    Raises:
        ValidationError: Premiere regle violee
    """
    email = clean_input(email)
    password = clean_input(password)

    if not email:
        raise ValidationError("email", EMAIL_REQUIRED)
    if not password:
        raise ValidationError("password", PASSWORD_REQUIRED)

    return email, password
