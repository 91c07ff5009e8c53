"""
Service d'import CSV de la mediatheque.

Transforme le texte complet d'un fichier CSV en enregistrements types
selon un schema de colonnes. Etapes, dans l'ordre:

1. Decoupage en lignes, suppression des lignes vides
2. Decoupage de l'en-tete en colonnes
3. Validation de l'en-tete (colonnes obligatoires, liste blanche stricte)
4. Correspondance nom de colonne -> index
5. Decodage de chaque ligne de donnees, dans l'ordre du fichier

L'import s'arrete a la premiere erreur : pas d'import partiel.
Aucune entree/sortie ici, la lecture du fichier et la persistance
sont a la charge de l'appelant.
"""

from typing import Any, Optional

from loguru import logger

from mediashelf.adapters.csv.tokenizer import parse_delimited_line, tokenize_line
from mediashelf.core.value_objects import (
    ColumnSchema,
    ImportErrorKind,
    ImportFailure,
    ImportOutcome,
    ImportSuccess,
    ParsedRow,
)


class CSVImportError(Exception):
    """
    Erreur terminale d'import CSV.

    Le message est destine a etre affiche tel quel a l'utilisateur.

    Attributes:
        kind: Categorie d'erreur (ImportErrorKind)
    """

    kind: ImportErrorKind

    line: Optional[int] = None
    column: Optional[str] = None
    detail: Optional[str] = None

    @property
    def message(self) -> str:
        return str(self)

    def to_failure(self) -> ImportFailure:
        """Convertit l'erreur en resultat d'import."""
        return ImportFailure(
            kind=self.kind,
            message=self.message,
            line=self.line,
            column=self.column,
            detail=self.detail,
        )


class EmptyFileError(CSVImportError):
    """Aucune ligne non vide."""

    kind = ImportErrorKind.EMPTY_FILE

    def __init__(self) -> None:
        super().__init__("Le fichier CSV est vide.")


class InsufficientDataError(CSVImportError):
    """Moins de deux lignes non vides (en-tete + une ligne de donnees)."""

    kind = ImportErrorKind.INSUFFICIENT_DATA

    def __init__(self) -> None:
        super().__init__(
            "Le fichier CSV doit contenir au moins une ligne d'en-tete "
            "et une ligne de donnees."
        )


class MissingRequiredColumnError(CSVImportError):
    """Colonne obligatoire absente de l'en-tete."""

    kind = ImportErrorKind.MISSING_REQUIRED_COLUMN

    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(f"Colonne obligatoire manquante: '{column}'")


class UnknownColumnError(CSVImportError):
    """Colonne d'en-tete absente de la liste des colonnes supportees."""

    kind = ImportErrorKind.UNKNOWN_COLUMN

    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(
            f"Colonne inconnue: '{column}'. Voir la liste des colonnes supportees."
        )


class InconsistentColumnCountError(CSVImportError):
    """Nombre de cellules different de celui de l'en-tete."""

    kind = ImportErrorKind.INCONSISTENT_COLUMN_COUNT

    def __init__(self, line: int, expected: int, actual: int) -> None:
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"La ligne {line} contient {actual} colonne(s) "
            f"alors que l'en-tete en declare {expected}."
        )


class InvalidRowDataError(CSVImportError):
    """Erreur de decodage d'une ligne de donnees."""

    kind = ImportErrorKind.INVALID_ROW_DATA

    def __init__(self, line: int, detail: str) -> None:
        self.line = line
        self.detail = detail
        super().__init__(f"Donnees invalides a la ligne {line}: {detail}")


def split_lines(text: str) -> list[str]:
    """
    Decoupe le texte en lignes non vides (LF ou CRLF).

    Raises:
        EmptyFileError: Si aucune ligne non vide
        InsufficientDataError: Si une seule ligne non vide
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise EmptyFileError()
    if len(lines) < 2:
        raise InsufficientDataError()
    return lines


def validate_header(header: list[str], schema: ColumnSchema) -> None:
    """
    Verifie l'en-tete contre le schema (comparaison insensible a la casse).

    Les colonnes obligatoires sont verifiees en premier, dans l'ordre du
    schema ; un alias suffit a satisfaire une colonne obligatoire.
    L'en-tete est ensuite une liste blanche stricte.

    Raises:
        MissingRequiredColumnError: Colonne obligatoire absente
        UnknownColumnError: Colonne non declaree (ni nom, ni alias)
    """
    present = {name.lower() for name in header}

    for column in schema.required_columns:
        if not present.intersection(column.accepted_keys):
            raise MissingRequiredColumnError(column.name)

    allowed = schema.allowed_keys
    for name in header:
        if name.lower() not in allowed:
            raise UnknownColumnError(name)


def create_column_mapping(header: list[str]) -> dict[str, int]:
    """Nom de colonne en minuscules -> index. Une colonne dupliquee garde le dernier index."""
    return {name.lower(): index for index, name in enumerate(header)}


def decode_row(row: ParsedRow, mapping: dict[str, int], schema: ColumnSchema) -> Any:
    """
    Construit un enregistrement a partir d'une ligne.

    Pour chaque colonne du schema, la premiere cellule non vide parmi le nom
    canonique puis les alias presents dans l'en-tete est convertie.
    Une colonne absente de l'en-tete n'est pas convertie : le champ garde
    la valeur par defaut de l'enregistrement (None, ou False pour "watched").

    Raises:
        InvalidRowDataError: Toute erreur levee pendant le decodage,
            rattachee au numero de ligne
    """
    try:
        fields: dict[str, Any] = {}
        for column in schema.columns:
            indexes = [mapping[key] for key in column.accepted_keys if key in mapping]
            if not indexes:
                continue
            raw = next((row.cells[i] for i in indexes if row.cells[i].strip()), "")
            fields[column.field] = column.coerce(raw)
        return schema.record_factory(**fields)
    except Exception as exc:
        raise InvalidRowDataError(row.line_number, str(exc)) from exc


class CSVImporterService:
    """
    Service d'import CSV.

    Sans etat : chaque appel est independant et la meme instance
    peut etre utilisee depuis plusieurs threads.
    """

    def parse(self, text: str, schema: ColumnSchema) -> list[Any]:
        """
        Decode le texte CSV en enregistrements.

        Args:
            text: Contenu complet du fichier
            schema: Schema du type d'enregistrement attendu

        Returns:
            Enregistrements dans l'ordre du fichier

        Raises:
            CSVImportError: Premiere erreur rencontree (sous-classe typee)
        """
        lines = split_lines(text)

        header = parse_delimited_line(lines[0])
        validate_header(header, schema)
        logger.debug(f"En-tete CSV valide pour {schema.name}: {header}")

        mapping = create_column_mapping(header)

        records = []
        for index in range(1, len(lines)):
            row = tokenize_line(lines[index], line_number=index + 1)
            if len(row.cells) != len(header):
                raise InconsistentColumnCountError(
                    row.line_number, expected=len(header), actual=len(row.cells)
                )
            records.append(decode_row(row, mapping, schema))

        return records

    def import_text(self, text: str, schema: ColumnSchema) -> ImportOutcome:
        """
        Importe le texte CSV et retourne un resultat plutot qu'une exception.

        Args:
            text: Contenu complet du fichier
            schema: Schema du type d'enregistrement attendu

        Returns:
            ImportSuccess avec les enregistrements, ou ImportFailure
            decrivant la premiere erreur
        """
        try:
            records = self.parse(text, schema)
        except CSVImportError as e:
            logger.warning(f"Import CSV {schema.name} en echec: {e}")
            return e.to_failure()

        logger.debug(f"Import CSV {schema.name}: {len(records)} enregistrement(s)")
        return ImportSuccess(records=tuple(records), count=len(records))
