"""
Decoupage des lignes CSV en cellules.

Tokenizer volontairement minimal, compatible avec les fichiers deja
exportes par l'application :
- la virgule est le seul separateur
- un guillemet double bascule le mode "entre guillemets" et n'est jamais conserve
- les guillemets doubles ("") ne sont PAS interpretes comme un echappement
- chaque cellule est nettoyee de ses espaces de debut et de fin
"""

from mediashelf.core.value_objects import ParsedRow

DELIMITER = ","
QUOTE = '"'


def parse_delimited_line(line: str) -> list[str]:
    """
    Decoupe une ligne en cellules.

    Args:
        line: Ligne brute (sans le saut de ligne)

    Returns:
        Liste des cellules. Contient toujours au moins une cellule,
        la derniere etant emise meme si la ligne se termine par une virgule.

    Exemple:
        >>> parse_delimited_line('"Title,with,commas", true')
        ['Title,with,commas', 'true']
    """
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    cells.append("".join(current).strip())
    return cells


def tokenize_line(line: str, line_number: int) -> ParsedRow:
    """Decoupe une ligne et l'associe a son numero de ligne."""
    return ParsedRow(line_number=line_number, cells=tuple(parse_delimited_line(line)))
