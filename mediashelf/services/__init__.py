"""
Services applicatifs (cas d'utilisation).

- similarity : scoring de pertinence et classement des resultats de recherche
- csv_importer : import CSV vers des enregistrements types
- schemas : schemas de colonnes des films et series
"""

from mediashelf.services.csv_importer import (
    CSVImportError,
    CSVImporterService,
    EmptyFileError,
    InconsistentColumnCountError,
    InsufficientDataError,
    InvalidRowDataError,
    MissingRequiredColumnError,
    UnknownColumnError,
)
from mediashelf.services.schemas import MOVIE_SCHEMA, TV_SHOW_SCHEMA, get_schema
from mediashelf.services.similarity import (
    MAX_SCORE,
    NO_MATCH_SCORE,
    RelevanceRanker,
    edit_distance,
    relevance_score,
)

__all__ = [
    "CSVImportError",
    "CSVImporterService",
    "EmptyFileError",
    "InsufficientDataError",
    "MissingRequiredColumnError",
    "UnknownColumnError",
    "InconsistentColumnCountError",
    "InvalidRowDataError",
    "MOVIE_SCHEMA",
    "TV_SHOW_SCHEMA",
    "get_schema",
    "MAX_SCORE",
    "NO_MATCH_SCORE",
    "RelevanceRanker",
    "edit_distance",
    "relevance_score",
]
