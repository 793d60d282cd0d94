"""
Constantes pour Applab.

Contient les regles de validation, l'organisation du stockage
et les textes affiches a l'utilisateur (en russe, langue de l'application).
"""

from typing import Final

# ============================================================================
# Stockage
# ============================================================================

# Collection des profils : un document par utilisateur sous Users/{uid}
USERS_COLLECTION: Final[str] = "Users"

# Format de la date d'inscription (dd-MM-yyyy)
REGISTRATION_DATE_FORMAT: Final[str] = "%d-%m-%Y"

# ============================================================================
# Validation
# ============================================================================

MIN_PASSWORD_LENGTH: Final[int] = 6

NAME_REQUIRED: Final[str] = "Имя не может быть пустым"
EMAIL_REQUIRED: Final[str] = "Email не может быть пустым"
PASSWORD_REQUIRED: Final[str] = "Пароль не может быть пустым"
PASSWORD_TOO_SHORT: Final[str] = (
    f"Пароль должен быть не менее {MIN_PASSWORD_LENGTH} символов"
)

# ============================================================================
# Profil
# ============================================================================

# Nom affiche quand aucun document de profil n'existe
FALLBACK_NAME: Final[str] = "Имя не найдено"
PROFILE_NOT_LOADED: Final[str] = "Не удалось загрузить данные пользователя."

NAME_LABEL: Final[str] = "Имя: "
EMAIL_LABEL: Final[str] = "Email: "

# ============================================================================
# Messages des flux
# ============================================================================

REGISTRATION_SUCCESS: Final[str] = "Регистрация прошла успешно!"
LOGIN_SUCCESS: Final[str] = "Вход выполнен успешно!"

REGISTRATION_ERROR_PREFIX: Final[str] = "Ошибка регистрации: "
PROFILE_WRITE_ERROR_PREFIX: Final[str] = "Ошибка сохранения данных: "
LOGIN_ERROR_PREFIX: Final[str] = "Ошибка входа: "
PROFILE_LOAD_ERROR_PREFIX: Final[str] = "Ошибка загрузки: "

# ============================================================================
# Session
# ============================================================================

NOT_AUTHENTICATED: Final[str] = "Вы не вошли в систему. Выполните вход."
LOGOUT_SUCCESS: Final[str] = "Вы вышли из системы."
FIREBASE_NOT_CONFIGURED: Final[str] = (
    "Firebase не настроен: задайте APPLAB_FIREBASE_API_KEY и APPLAB_FIREBASE_DATABASE_URL"
)
