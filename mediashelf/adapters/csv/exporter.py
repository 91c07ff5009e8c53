"""
Export d'enregistrements vers un texte CSV relisible par l'importeur.

L'en-tete contient les noms canoniques des colonnes du schema.
Les cellules contenant une virgule sont entourees de guillemets doubles.
Le tokenizer ne gerant pas l'echappement des guillemets, une valeur
contenant un guillemet double ou un saut de ligne ne peut pas etre exportee.
"""

from typing import Any, Iterable

from loguru import logger

from mediashelf.adapters.csv.tokenizer import DELIMITER, QUOTE
from mediashelf.core.value_objects import ColumnSchema


class CSVExporter:
    """
    Serialise des enregistrements selon un schema de colonnes.

    Sans etat : une meme instance peut etre partagee.
    """

    def export(self, records: Iterable[Any], schema: ColumnSchema) -> str:
        """
        Produit le texte CSV complet (en-tete + une ligne par enregistrement).

        Args:
            records: Enregistrements portant les attributs declares par le schema
            schema: Schema de colonnes

        Returns:
            Texte CSV, lignes separees par "\\n", termine par un saut de ligne

        Raises:
            ValueError: Si une valeur n'est pas representable
        """
        lines = [DELIMITER.join(column.name for column in schema.columns)]
        count = 0
        for record in records:
            cells = [
                self._format_cell(getattr(record, column.field), column.name)
                for column in schema.columns
            ]
            lines.append(DELIMITER.join(cells))
            count += 1

        logger.debug(f"Export CSV {schema.name}: {count} enregistrement(s)")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_cell(value: Any, column_name: str) -> str:
        """Formate une valeur pour une cellule CSV."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        text = str(value)
        if QUOTE in text or "\n" in text or "\r" in text:
            raise ValueError(
                f"Valeur non exportable pour la colonne '{column_name}': {text!r}"
            )
        if DELIMITER in text:
            return f"{QUOTE}{text}{QUOTE}"
        return text
