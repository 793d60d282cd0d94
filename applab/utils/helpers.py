"""
Fonctions utilitaires partagees dans le projet Applab.

- clean_input : nettoyage d'une saisie de formulaire
- format_registration_date : date d'inscription au format jj-mm-aaaa
"""

from datetime import date
from typing import Optional

from applab.utils.constants import REGISTRATION_DATE_FORMAT


def clean_input(value: Optional[str]) -> str:
    """Retire les espaces autour d'une saisie (None devient une chaine vide)."""
    if not value:
        return ""
    return value.strip()


def format_registration_date(day: Optional[date] = None) -> str:
    """
    Formate une date d'inscription selon l'horloge locale.

    Args:
        day: Date a formater (defaut: aujourd'hui, heure locale de la machine)

    Returns:
        La date au format jj-mm-aaaa (ex: "19-10-2026")
    """
    if day is None:
        day = date.today()
    return day.strftime(REGISTRATION_DATE_FORMAT)
