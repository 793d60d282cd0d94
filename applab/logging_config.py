"""
Configuration du logging d'Applab via loguru.

Deux sorties :
- console (stderr) : lisible, colorée, au niveau choisi par l'utilisateur (-v / -q)
- fichier : JSON avec rotation, tous niveaux, pour retracer les requêtes Firebase

Les champs sensibles (mot de passe, jetons de session) sont retirés des extras
de chaque enregistrement avant qu'il n'atteigne un handler.
"""

import sys
from pathlib import Path

from loguru import logger

# Extras jamais écrits, quel que soit le handler
SENSITIVE_FIELDS = frozenset({"password", "id_token", "refresh_token", "idToken", "refreshToken"})

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)


def redact_sensitive(record: dict) -> None:
    """Retire de record["extra"] les identifiants et jetons."""
    extra = record["extra"]
    for field in SENSITIVE_FIELDS.intersection(extra):
        del extra[field]


def configure_logging(
    log_level: str = "WARNING",
    log_file: Path = Path("logs/applab.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args:
        log_level: Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file: Fichier JSON recevant tous les niveaux
        rotation_size: Taille avant rotation (ex: "10 MB")
        retention_count: Nombre de fichiers rotatifs conservés
    """
    logger.remove()
    logger.configure(patcher=redact_sensitive)

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # requêtes Identity Toolkit / Realtime Database
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)
