"""
Point d'entrée CLI de MediaShelf.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import columns, import_csv, normalize_csv, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="mediashelf",
    help="Suivi de mediatheque personnelle",
)
container = Container()


def _console_level(verbose: int, quiet: bool, default: str) -> str:
    """Niveau de log console selon les options de verbosite."""
    if quiet:
        return "ERROR"
    if verbose >= 1:
        return "DEBUG"
    return default


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MediaShelf - Suivi de mediatheque personnelle."""
    if not verbose and not quiet:
        return
    settings = get_config()
    configure_logging(
        log_level=_console_level(verbose, quiet, settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Commandes d'import CSV
app.command(name="import-csv")(import_csv)
app.command()(columns)
app.command(name="normalize-csv")(normalize_csv)

# Recherche
app.command()(search)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Encodage CSV : {config.csv_encoding}")
    typer.echo(f"Resultats de recherche : {config.search_result_limit}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaShelf v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de MediaShelf", version=__version__)

    app()


if __name__ == "__main__":
    main()
