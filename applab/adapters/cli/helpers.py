"""
Utilitaires partages pour les commandes CLI d'Applab.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant les clients HTTP
- render_profile : affichage de l'ecran d'accueil (nom, email)
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console
from rich.panel import Panel

from applab.container import Container
from applab.core.entities.user import ProfileLoad
from applab.utils.constants import (
    EMAIL_LABEL,
    NAME_LABEL,
    PROFILE_LOAD_ERROR_PREFIX,
)

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("applab")
    try:
        yield
    finally:
        loguru_logger.enable("applab")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Les clients HTTP Firebase sont fermes a la fin de la commande,
    y compris quand elle se termine par typer.Exit.

    Usage:
        @with_container
        async def my_command(container, ...):
            auth = container.auth_service()
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        try:
            return await func(container, *args, **kwargs)
        finally:
            await container.identity_client().close()
            await container.database_client().close()
            container.session_store().close()
    return wrapper


def render_profile(result: ProfileLoad) -> None:
    """
    Affiche le resultat d'une lecture de profil.

    - Vue disponible : panneau nom/email
    - Profil absent : avertissement puis vue de repli
    - Lecture en echec : message d'erreur du stockage, aucune vue
    """
    if result.notice and result.has_view:
        console.print(f"[yellow]{result.notice}[/yellow]")
    elif result.notice:
        console.print(f"[red]{PROFILE_LOAD_ERROR_PREFIX}{result.notice}[/red]")

    if result.view is None:
        return

    console.print(
        Panel(
            f"{NAME_LABEL}{result.view.name}\n{EMAIL_LABEL}{result.view.email}",
            expand=False,
        )
    )
