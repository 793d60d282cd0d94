"""
Point d'entrée CLI d'Applab.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import home, login, logout, register
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="applab",
    help="Inscription, connexion et profil utilisateur (Firebase)",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Applab - Compte utilisateur et profil."""
    if not quiet and not verbose:
        return

    if quiet:
        log_level = "ERROR"
    else:
        log_level = "DEBUG" if verbose > 1 else "INFO"

    settings = get_config()
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Ecrans de l'application
app.command()(register)
app.command()(login)
app.command()(home)
app.command()(logout)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Applab")
    typer.echo(f"Firebase : {'configuré' if config.firebase_enabled else 'non configuré'}")
    typer.echo(f"Base de données : {config.firebase_database_url or '-'}")
    typer.echo(f"Identity Toolkit : {config.identity_toolkit_url}")
    typer.echo(f"Session : {config.session_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Applab v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage d'Applab", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
