"""
Objets valeur representant le resultat d'un import CSV.

Un import produit soit un ImportSuccess (enregistrements decodes),
soit un ImportFailure (premiere erreur rencontree).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ImportErrorKind(Enum):
    """Categorie d'erreur d'import. Toutes sont terminales."""

    EMPTY_FILE = "empty_file"
    INSUFFICIENT_DATA = "insufficient_data"
    MISSING_REQUIRED_COLUMN = "missing_required_column"
    UNKNOWN_COLUMN = "unknown_column"
    INCONSISTENT_COLUMN_COUNT = "inconsistent_column_count"
    INVALID_ROW_DATA = "invalid_row_data"


@dataclass(frozen=True)
class ImportSuccess:
    """
    Import reussi.

    Attributs:
        records: Enregistrements decodes, dans l'ordre du fichier
        count: Nombre d'enregistrements
    """

    records: tuple[Any, ...]
    count: int

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class ImportFailure:
    """
    Import en echec sur la premiere erreur rencontree.

    Attributs:
        kind: Categorie d'erreur
        message: Message lisible, affichable tel quel
        line: Numero de ligne concerne (1-based) si applicable
        column: Nom de colonne concerne si applicable
        detail: Detail de l'erreur de decodage d'une ligne
    """

    kind: ImportErrorKind
    message: str
    line: Optional[int] = None
    column: Optional[str] = None
    detail: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return False


ImportOutcome = Union[ImportSuccess, ImportFailure]
