"""
Commandes CLI d'import CSV (import-csv, columns, normalize-csv).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from mediashelf.adapters.cli.helpers import (
    console,
    read_text_file,
    suppress_loguru,
    with_container,
)
from mediashelf.core.value_objects import ColumnSchema, ImportFailure, MediaKind
from mediashelf.services.schemas import describe_columns, get_schema

# Nombre de colonnes du schema affichees dans le tableau de resultat
_PREVIEW_COLUMNS = 4


def _resolve_schema(kind: MediaKind) -> ColumnSchema:
    """Schema de la categorie, ou sortie en erreur si non supportee."""
    try:
        return get_schema(kind)
    except ValueError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)


def _print_failure(failure: ImportFailure) -> None:
    console.print("[bold red]Echec de l'import[/bold red]")
    console.print(failure.message, markup=False)


def _records_table(records, schema: ColumnSchema) -> Table:
    """Tableau Rich des premiers champs de chaque enregistrement."""
    columns = schema.columns[:_PREVIEW_COLUMNS]
    table = Table(title=f"Import {schema.name}")
    table.add_column("#", justify="right", style="dim")
    for column in columns:
        table.add_column(column.name)
    for index, record in enumerate(records, start=1):
        values = []
        for column in columns:
            value = getattr(record, column.field)
            values.append("" if value is None else escape(str(value)))
        table.add_row(str(index), *values)
    return table


def import_csv(
    csv_file: Annotated[Path, typer.Argument(help="Fichier CSV a importer")],
    kind: Annotated[
        MediaKind,
        typer.Option("--kind", "-k", help="Categorie des enregistrements"),
    ] = MediaKind.MOVIES,
    show: Annotated[
        bool,
        typer.Option("--show/--no-show", help="Affiche les enregistrements importes"),
    ] = True,
) -> None:
    """
    Importe un fichier CSV et affiche les enregistrements decodes.

    L'import s'arrete a la premiere ligne invalide.
    """
    _import_csv(csv_file, kind, show)


@with_container
def _import_csv(container, csv_file: Path, kind: MediaKind, show: bool) -> None:
    """Implementation de la commande import-csv."""
    config = container.config()
    schema = _resolve_schema(kind)
    text = read_text_file(csv_file, config.csv_encoding)

    importer = container.csv_importer_service()
    outcome = importer.import_text(text, schema)

    with suppress_loguru():
        if isinstance(outcome, ImportFailure):
            _print_failure(outcome)
            raise typer.Exit(code=1)

        if show and outcome.records:
            console.print(_records_table(outcome.records, schema))
        console.print(
            f"\n[green]{outcome.count}[/green] enregistrement(s) importe(s) depuis {csv_file.name}"
        )


def columns(
    kind: Annotated[
        MediaKind,
        typer.Option("--kind", "-k", help="Categorie des enregistrements"),
    ] = MediaKind.MOVIES,
) -> None:
    """Affiche la structure CSV attendue pour une categorie."""
    schema = _resolve_schema(kind)

    table = Table(title=f"Colonnes CSV - {schema.name}")
    table.add_column("Colonne", style="cyan")
    table.add_column("Type")
    table.add_column("Obligatoire")
    table.add_column("Anciens noms", style="dim")
    for description in describe_columns(schema):
        table.add_row(
            description.name,
            description.type_label,
            "oui" if description.required else "non",
            ", ".join(description.aliases),
        )
    console.print(table)


def normalize_csv(
    csv_file: Annotated[Path, typer.Argument(help="Fichier CSV source")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier de sortie (stdout par defaut)"),
    ] = None,
    kind: Annotated[
        MediaKind,
        typer.Option("--kind", "-k", help="Categorie des enregistrements"),
    ] = MediaKind.MOVIES,
) -> None:
    """
    Reecrit un fichier CSV avec les noms de colonnes actuels.

    Les anciennes colonnes (genre, poster...) sont converties
    vers leur nom canonique. Le fichier doit etre importable.
    """
    _normalize_csv(csv_file, output, kind)


@with_container
def _normalize_csv(container, csv_file: Path, output: Optional[Path], kind: MediaKind) -> None:
    """Implementation de la commande normalize-csv."""
    config = container.config()
    schema = _resolve_schema(kind)
    text = read_text_file(csv_file, config.csv_encoding)

    outcome = container.csv_importer_service().import_text(text, schema)
    if isinstance(outcome, ImportFailure):
        _print_failure(outcome)
        raise typer.Exit(code=1)

    try:
        exported = container.csv_exporter().export(outcome.records, schema)
    except ValueError as e:
        console.print(f"[red]Erreur:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(exported, nl=False)
        return

    output.write_text(exported, encoding=config.csv_encoding)
    console.print(f"[green]{outcome.count}[/green] enregistrement(s) ecrit(s) dans {output}")
