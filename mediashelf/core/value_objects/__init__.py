"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaKind : Categorie de media (films, series, livres, comics, jeux)
- ColumnSpec : Description d'une colonne CSV (nom, conversion, alias)
- ColumnSchema : Schema complet d'un type d'enregistrement importable
- ParsedRow : Ligne CSV decoupee avec son numero de ligne
- ImportErrorKind : Categorie d'erreur d'import
- ImportSuccess / ImportFailure / ImportOutcome : Resultat d'un import
"""

from mediashelf.core.value_objects.import_outcome import (
    ImportErrorKind,
    ImportFailure,
    ImportOutcome,
    ImportSuccess,
)
from mediashelf.core.value_objects.import_schema import (
    ColumnSchema,
    ColumnSpec,
    MediaKind,
    ParsedRow,
)

__all__ = [
    "MediaKind",
    "ColumnSpec",
    "ColumnSchema",
    "ParsedRow",
    "ImportErrorKind",
    "ImportSuccess",
    "ImportFailure",
    "ImportOutcome",
]
