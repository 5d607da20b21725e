"""
Point d'entrée CLI de bcmirror.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import metadata, players, search, sync_app
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity, set_console_level

app = typer.Typer(
    name="bcmirror",
    help="Miroir local des players, videos et playlists Brightcove",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


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
    """bcmirror - Synchronisation Brightcove vers une base locale."""
    if quiet:
        state["quiet"] = True
    else:
        state["verbose"] = verbose

    if quiet or verbose:
        set_console_level(
            level_from_verbosity(get_config().log_level, verbose=verbose, quiet=quiet)
        )


app.add_typer(sync_app, name="sync")
app.command()(players)
app.command()(search)
app.command()(metadata)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration bcmirror")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Compte Brightcove : {config.account_id or '-'}")
    typer.echo(
        f"API Brightcove : {'activée' if config.brightcove_enabled else 'désactivée'}"
    )
    typer.echo(f"Client API : {config.api_client}")
    typer.echo(f"Taille de page : {config.page_size}")
    typer.echo(f"Cache des jetons : {config.cache_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"bcmirror v{__version__}")


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

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de bcmirror", version=__version__)

    app()


if __name__ == "__main__":
    main()
