"""
Commandes CLI des ecrans de l'application (register, login, home, logout).

Chaque commande synchrone delegue a une implementation async qui recoit le
container DI. Les erreurs de saisie et des services sont affichees puis la
commande se termine avec le code 1 : l'utilisateur peut simplement reessayer.
"""

import asyncio
from typing import Annotated

import typer

from applab.adapters.cli.helpers import (
    console,
    render_profile,
    suppress_loguru,
    with_container,
)
from applab.core.exceptions import (
    AuthenticationFailed,
    IdentityCreationFailed,
    NotAuthenticatedError,
    ProfileWriteFailed,
    ValidationError,
)
from applab.utils.constants import (
    FIREBASE_NOT_CONFIGURED,
    LOGIN_ERROR_PREFIX,
    LOGIN_SUCCESS,
    LOGOUT_SUCCESS,
    NOT_AUTHENTICATED,
    PROFILE_WRITE_ERROR_PREFIX,
    REGISTRATION_ERROR_PREFIX,
    REGISTRATION_SUCCESS,
)


def _ensure_configured(container) -> None:
    """Interrompt la commande si Firebase n'est pas configure."""
    if not container.config().firebase_enabled:
        console.print(f"[red]{FIREBASE_NOT_CONFIGURED}[/red]")
        raise typer.Exit(1)


def register(
    name: Annotated[str, typer.Argument(help="Nom de l'utilisateur")],
    email: Annotated[str, typer.Argument(help="Email du compte")],
    password: Annotated[
        str,
        typer.Option(prompt=True, hide_input=True, help="Mot de passe (6 caracteres minimum)"),
    ],
) -> None:
    """Cree un compte et enregistre le profil utilisateur."""
    asyncio.run(_register_async(name, email, password))


@with_container
async def _register_async(container, name: str, email: str, password: str) -> None:
    """Implementation async de la commande register."""
    _ensure_configured(container)
    auth = container.auth_service()

    with suppress_loguru():
        try:
            await auth.register(name, email, password)
        except ValidationError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(1)
        except IdentityCreationFailed as e:
            console.print(f"[red]{REGISTRATION_ERROR_PREFIX}{e.message}[/red]")
            raise typer.Exit(1)
        except ProfileWriteFailed as e:
            console.print(f"[red]{PROFILE_WRITE_ERROR_PREFIX}{e.message}[/red]")
            raise typer.Exit(1)

        console.print(f"[green]{REGISTRATION_SUCCESS}[/green]")
        console.print("[dim]applab login EMAIL[/dim]")


def login(
    email: Annotated[str, typer.Argument(help="Email du compte")],
    password: Annotated[
        str,
        typer.Option(prompt=True, hide_input=True, help="Mot de passe"),
    ],
) -> None:
    """Connecte l'utilisateur puis affiche l'ecran d'accueil."""
    asyncio.run(_login_async(email, password))


@with_container
async def _login_async(container, email: str, password: str) -> None:
    """Implementation async de la commande login."""
    _ensure_configured(container)
    auth = container.auth_service()

    with suppress_loguru():
        try:
            identity = await auth.login(email, password)
        except ValidationError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(1)
        except AuthenticationFailed as e:
            console.print(f"[red]{LOGIN_ERROR_PREFIX}{e.message}[/red]")
            raise typer.Exit(1)

        console.print(f"[green]{LOGIN_SUCCESS}[/green]")
        render_profile(await auth.load_profile(identity))


def home() -> None:
    """Affiche le profil de l'utilisateur connecte."""
    asyncio.run(_home_async())


@with_container
async def _home_async(container) -> None:
    """Implementation async de la commande home."""
    _ensure_configured(container)
    auth = container.auth_service()

    with suppress_loguru():
        try:
            result = await auth.load_current_profile()
        except NotAuthenticatedError:
            console.print(f"[yellow]{NOT_AUTHENTICATED}[/yellow]")
            raise typer.Exit(1)

        render_profile(result)


def logout() -> None:
    """Ferme la session courante."""
    asyncio.run(_logout_async())


@with_container
async def _logout_async(container) -> None:
    """Implementation async de la commande logout."""
    auth = container.auth_service()
    await auth.logout()
    console.print(LOGOUT_SUCCESS)
