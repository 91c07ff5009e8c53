"""
Utilitaires partages pour les commandes CLI de MediaShelf.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- read_text_file : lecture d'un fichier avec sortie propre en cas d'erreur
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from mediashelf.container import Container

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("mediashelf")
    try:
        yield
    finally:
        loguru_logger.enable("mediashelf")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            config = container.config()
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)

    return wrapper


def read_text_file(path: Path, encoding: str) -> str:
    """
    Lit un fichier texte complet.

    Affiche l'erreur et quitte avec le code 1 si le fichier est
    introuvable ou n'est pas decodable avec l'encodage configure.
    """
    if not path.is_file():
        console.print(f"[red]Erreur:[/red] Fichier introuvable: {path}")
        raise typer.Exit(code=1)
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        console.print(f"[red]Erreur:[/red] Fichier illisible en {encoding}: {e}")
        raise typer.Exit(code=1)
