"""
Schemas de colonnes des imports CSV de la mediatheque.

Chaque schema declare les colonnes obligatoires et optionnelles
d'un type d'enregistrement, leur conversion et les anciens noms
de colonnes toujours acceptes pour les films ("genre" -> "genres",
"poster" -> "posterPath").

Les series n'exigent que "name" : "watched" est optionnel et vaut false
quand il est absent ou vide. Les notes des series acceptent un pourcentage
("95%" -> 9.5) et "airDate" en MM/dd/yyyy est normalise en yyyy-MM-dd.
"""

from dataclasses import dataclass

from mediashelf.adapters.csv.coercers import (
    coerce_air_date,
    coerce_bool,
    coerce_float,
    coerce_int,
    coerce_percent_float,
    coerce_string,
    required_string,
)
from mediashelf.core.entities import MovieRecord, TVShowRecord
from mediashelf.core.value_objects import ColumnSchema, ColumnSpec, MediaKind

MOVIE_SCHEMA = ColumnSchema(
    name="movies",
    record_factory=MovieRecord,
    columns=(
        ColumnSpec("title", "title", required_string("title"), required=True),
        ColumnSpec("watched", "watched", coerce_bool, required=True),
        ColumnSpec("year", "year", coerce_int),
        ColumnSpec("rating", "rating", coerce_float),
        ColumnSpec("tmdbRating", "tmdb_rating", coerce_float),
        ColumnSpec("genres", "genres", coerce_string, aliases=("genre",)),
        ColumnSpec("runtime", "runtime", coerce_int),
        ColumnSpec("overview", "overview", coerce_string),
        ColumnSpec("posterPath", "poster_path", coerce_string, aliases=("poster",)),
        ColumnSpec("backdropPath", "backdrop_path", coerce_string),
        ColumnSpec("releaseDate", "release_date", coerce_string),
        ColumnSpec("tmdbId", "tmdb_id", coerce_string),
        ColumnSpec("directors", "directors", coerce_string),
        ColumnSpec("cast", "cast", coerce_string),
    ),
)

TV_SHOW_SCHEMA = ColumnSchema(
    name="tv",
    record_factory=TVShowRecord,
    columns=(
        ColumnSpec("name", "name", required_string("name"), required=True),
        ColumnSpec("watched", "watched", coerce_bool),
        ColumnSpec("year", "year", coerce_int),
        ColumnSpec("rating", "rating", coerce_percent_float),
        ColumnSpec("tmdbRating", "tmdb_rating", coerce_percent_float),
        ColumnSpec("posterPath", "poster_path", coerce_string),
        ColumnSpec("backdropPath", "backdrop_path", coerce_string),
        ColumnSpec("seasons", "seasons", coerce_string),
        ColumnSpec("genre", "genres", coerce_string),
        ColumnSpec("overview", "overview", coerce_string),
        ColumnSpec("airDate", "air_date", coerce_air_date),
        ColumnSpec("tmdbId", "tmdb_id", coerce_string),
        ColumnSpec("creators", "creators", coerce_string),
        ColumnSpec("cast", "cast", coerce_string),
        ColumnSpec("status", "status", coerce_string),
        ColumnSpec("numberOfSeasons", "number_of_seasons", coerce_int),
        ColumnSpec("numberOfEpisodes", "number_of_episodes", coerce_int),
    ),
)

SCHEMAS: dict[MediaKind, ColumnSchema] = {
    MediaKind.MOVIES: MOVIE_SCHEMA,
    MediaKind.TV: TV_SHOW_SCHEMA,
}

# Libelles affiches dans l'aide, par nom de fonction de conversion
TYPE_LABELS = {
    "coerce_string": "texte",
    "coerce_required_string": "texte",
    "coerce_int": "nombre entier",
    "coerce_float": "nombre",
    "coerce_percent_float": "nombre ou pourcentage",
    "coerce_air_date": "date (MM/dd/yyyy ou yyyy-MM-dd)",
    "coerce_bool": "true/false",
}


@dataclass(frozen=True)
class ColumnDescription:
    """Ligne de la documentation des colonnes supportees."""

    name: str
    type_label: str
    required: bool
    aliases: tuple[str, ...]


def get_schema(kind: MediaKind | str) -> ColumnSchema:
    """
    Retourne le schema d'import d'une categorie de media.

    Raises:
        ValueError: Si la categorie n'a pas de schema d'import CSV
    """
    kind = MediaKind(kind)
    try:
        return SCHEMAS[kind]
    except KeyError:
        raise ValueError(f"Pas d'import CSV pour la categorie '{kind.value}'") from None


def describe_columns(schema: ColumnSchema) -> list[ColumnDescription]:
    """Colonnes supportees par un schema : obligatoires d'abord, puis optionnelles."""
    ordered = schema.required_columns + schema.optional_columns
    return [
        ColumnDescription(
            name=column.name,
            type_label=TYPE_LABELS.get(getattr(column.coerce, "__name__", ""), "texte"),
            required=column.required,
            aliases=column.aliases,
        )
        for column in ordered
    ]
