"""
Objets valeur decrivant le schema de colonnes d'un import CSV.

Un schema est construit une seule fois par type d'enregistrement
(films, series...) puis partage entre tous les imports.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class MediaKind(str, Enum):
    """Categorie de media geree par la mediatheque.

    Valeurs:
        MOVIES: Films
        TV: Series TV
        BOOKS: Livres
        COMICS: Comics (volumes)
        GAMES: Jeux video
    """

    MOVIES = "movies"
    TV = "tv"
    BOOKS = "books"
    COMICS = "comics"
    GAMES = "games"


@dataclass(frozen=True)
class ColumnSpec:
    """
    Description d'une colonne CSV attendue.

    Attributs:
        name: Nom de la colonne tel que documente (ex: "tmdbRating")
        field: Nom de l'attribut correspondant sur l'enregistrement
        coerce: Conversion de la cellule brute vers la valeur typee
        required: Colonne obligatoire dans l'en-tete
        aliases: Anciens noms de colonne toujours acceptes
    """

    name: str
    field: str
    coerce: Callable[[str], Any]
    required: bool = False
    aliases: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Nom canonique en minuscules."""
        return self.name.lower()

    @property
    def accepted_keys(self) -> tuple[str, ...]:
        """Nom canonique puis alias, en minuscules et dans l'ordre de priorite."""
        return (self.key,) + tuple(alias.lower() for alias in self.aliases)


@dataclass(frozen=True)
class ColumnSchema:
    """
    Schema complet d'un type d'enregistrement importable.

    Attributs:
        name: Nom lisible du type (ex: "movies")
        columns: Colonnes declarees, dans l'ordre d'export
        record_factory: Construit l'enregistrement a partir des champs decodes
    """

    name: str
    columns: tuple[ColumnSpec, ...]
    record_factory: Callable[..., Any]
    _by_key: dict[str, ColumnSpec] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[str, ColumnSpec] = {}
        for column in self.columns:
            for key in column.accepted_keys:
                if key in index:
                    raise ValueError(f"Colonne declaree deux fois: '{key}'")
                index[key] = column
        object.__setattr__(self, "_by_key", index)

    @property
    def required_columns(self) -> tuple[ColumnSpec, ...]:
        return tuple(column for column in self.columns if column.required)

    @property
    def optional_columns(self) -> tuple[ColumnSpec, ...]:
        return tuple(column for column in self.columns if not column.required)

    @property
    def allowed_keys(self) -> frozenset[str]:
        """Tous les noms acceptes (obligatoires, optionnels et alias) en minuscules."""
        return frozenset(self._by_key)

    def find(self, name: str) -> Optional[ColumnSpec]:
        """Retrouve la colonne correspondant a un nom d'en-tete (insensible a la casse)."""
        return self._by_key.get(name.lower())


@dataclass(frozen=True)
class ParsedRow:
    """
    Ligne de donnees decoupee en cellules brutes.

    Attributs:
        line_number: Numero de ligne (1-based, l'en-tete est la ligne 1)
        cells: Cellules brutes, deja nettoyees des espaces
    """

    line_number: int
    cells: tuple[str, ...]
