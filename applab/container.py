"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
configuration, session persistee, clients Firebase et service d'authentification.
"""

from dependency_injector import containers, providers

from .adapters.firebase.database_client import FirebaseRealtimeDatabase
from .adapters.firebase.identity_client import FirebaseIdentityClient
from .adapters.firebase.session_store import SessionStore
from .config import Settings
from .services.auth import AuthService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        auth = container.auth_service()
        identity = await auth.login("ann@example.com", "secret1")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Session courante - Singleton partage par les deux clients Firebase
    session_store = providers.Singleton(
        SessionStore,
        session_dir=config.provided.session_dir,
    )

    # Clients Firebase - Singleton pour reutiliser les connexions HTTP
    identity_client = providers.Singleton(
        FirebaseIdentityClient,
        api_key=config.provided.firebase_api_key,
        sessions=session_store,
        base_url=config.provided.identity_toolkit_url,
        timeout=config.provided.http_timeout,
    )

    database_client = providers.Singleton(
        FirebaseRealtimeDatabase,
        database_url=config.provided.firebase_database_url,
        sessions=session_store,
        timeout=config.provided.http_timeout,
    )

    # Service d'orchestration - Factory (sans etat propre)
    auth_service = providers.Factory(
        AuthService,
        identity_service=identity_client,
        document_store=database_client,
    )
