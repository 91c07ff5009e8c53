"""
Commande CLI de classement de resultats de recherche (search).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from mediashelf.adapters.cli.helpers import console, read_text_file, with_container
from mediashelf.services.similarity import MAX_SCORE, relevance_score


def format_score(score: int) -> str:
    """Libelle lisible d'un score de pertinence."""
    if score == MAX_SCORE:
        return "exact"
    if score == MAX_SCORE - 1:
        return "prefixe"
    if score == MAX_SCORE - 2:
        return "contient"
    return str(score)


def search(
    query: Annotated[str, typer.Argument(help="Texte recherche")],
    candidates_file: Annotated[
        Path,
        typer.Option("--file", "-f", help="Fichier de titres candidats (un par ligne)"),
    ],
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=1, help="Nombre maximum de resultats"),
    ] = None,
    library: Annotated[
        bool,
        typer.Option(
            "--library",
            help="Recherche locale: ne garde que les titres contenant la requete",
        ),
    ] = False,
) -> None:
    """Classe les titres d'un fichier par pertinence par rapport a la requete."""
    _search(query, candidates_file, limit, library)


@with_container
def _search(
    container, query: str, candidates_file: Path, limit: Optional[int], library: bool
) -> None:
    """Implementation de la commande search."""
    config = container.config()
    ranker = container.relevance_ranker()

    text = read_text_file(candidates_file, config.csv_encoding)
    candidates = [line.strip() for line in text.splitlines() if line.strip()]

    if library:
        ranked = ranker.search_library(candidates, query)
        scoring_query = query.strip()
    else:
        ranked = ranker.rank(candidates, query)
        scoring_query = query

    ranked = ranked[: limit or config.search_result_limit]
    if not ranked:
        console.print("[yellow]Aucun resultat[/yellow]")
        return

    table = Table(title=f"Resultats pour '{escape(query)}'")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre")
    table.add_column("Score", justify="right")
    for index, title in enumerate(ranked, start=1):
        table.add_row(
            str(index), escape(title), format_score(relevance_score(title, scoring_query))
        )
    console.print(table)
