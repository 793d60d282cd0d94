"""
Tests unitaires pour la validation des formulaires.

Ces tests verifient:
- L'ordre des regles d'inscription (nom -> email -> mot de passe -> longueur)
- L'ordre des regles de connexion (email -> mot de passe)
- Le nettoyage des espaces autour des saisies
"""

import pytest

from applab.core.exceptions import ValidationError
from applab.services.validation import validate_login, validate_registration
from applab.utils.constants import (
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    PASSWORD_REQUIRED,
    PASSWORD_TOO_SHORT,
)


class TestValidateRegistration:
    """Tests pour validate_registration."""

    def test_valid_input_is_returned_cleaned(self) -> None:
        """Les saisies valides sont retournees sans espaces autour."""
        result = validate_registration("  Ann ", " a@b.com ", " secret1 ")
        assert result == ("Ann", "a@b.com", "secret1")

    @pytest.mark.parametrize(
        ("name", "email", "password", "field", "message"),
        [
            ("", "", "", "name", NAME_REQUIRED),
            ("   ", "a@b.com", "secret1", "name", NAME_REQUIRED),
            ("Ann", "", "", "email", EMAIL_REQUIRED),
            ("Ann", "a@b.com", "", "password", PASSWORD_REQUIRED),
            ("Ann", "a@b.com", "abc", "password", PASSWORD_TOO_SHORT),
            ("Ann", "a@b.com", "  abc  ", "password", PASSWORD_TOO_SHORT),
        ],
    )
    def test_first_violated_rule_is_reported(
        self, name: str, email: str, password: str, field: str, message: str
    ) -> None:
        """Seule la premiere regle violee est remontee."""
        with pytest.raises(ValidationError) as exc_info:
            validate_registration(name, email, password)

        assert exc_info.value.field == field
        assert exc_info.value.message == message

    def test_password_of_exactly_six_characters_is_accepted(self) -> None:
        """Un mot de passe de 6 caracteres est valide."""
        assert validate_registration("Ann", "a@b.com", "abcdef")[2] == "abcdef"

    def test_none_values_are_treated_as_empty(self) -> None:
        """None est traite comme une saisie vide."""
        with pytest.raises(ValidationError) as exc_info:
            validate_registration(None, None, None)
        assert exc_info.value.field == "name"


class TestValidateLogin:
    """Tests pour validate_login."""

    def test_email_is_checked_before_password(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_login("", "")
        assert exc_info.value.field == "email"
        assert exc_info.value.message == EMAIL_REQUIRED

    def test_empty_password_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_login("a@b.com", "  ")
        assert exc_info.value.field == "password"
        assert exc_info.value.message == PASSWORD_REQUIRED

    def test_short_password_is_accepted_at_login(self) -> None:
        """La longueur minimale n'est verifiee qu'a l'inscription."""
        assert validate_login(" a@b.com", "abc ") == ("a@b.com", "abc")
