"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe APPLAB_,
et peut optionnellement être fournie via un fichier .env.

La clé API Firebase est optionnelle - les commandes d'authentification sont désactivées
si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de applab/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe APPLAB_.
    Exemple : APPLAB_FIREBASE_API_KEY=AIza...

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="APPLAB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
    )

    # Firebase (OPTIONNEL - authentification désactivée si la clé n'est pas définie)
    firebase_api_key: Optional[str] = Field(default=None)
    firebase_database_url: Optional[str] = Field(default=None)
    identity_toolkit_url: str = Field(default="https://identitytoolkit.googleapis.com/v1")

    # Réseau
    http_timeout: float = Field(default=30.0, gt=0)

    # Session courante (persistée entre deux commandes)
    session_dir: Path = Field(default=Path("~/.cache/applab/session"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("logs/applab.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("session_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def firebase_enabled(self) -> bool:
        """Vérifie si Firebase est configuré (clé API et URL de la base)."""
        return bool(self.firebase_api_key) and bool(self.firebase_database_url)
