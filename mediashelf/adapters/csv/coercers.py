"""
Fonctions de conversion des cellules CSV vers des valeurs typees.

Chaque fonction recoit la cellule brute et retourne la valeur typee.
Les champs optionnels invalides deviennent None silencieusement ;
seuls les champs obligatoires et les booleens non reconnus levent
une FieldCoercionError.
"""

import re
from datetime import datetime
from typing import Optional

TRUE_LITERALS = frozenset({"true", "yes", "1"})
FALSE_LITERALS = frozenset({"false", "no", "0", ""})

_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")

AIR_DATE_INPUT_FORMAT = "%m/%d/%Y"
AIR_DATE_OUTPUT_FORMAT = "%Y-%m-%d"


class FieldCoercionError(ValueError):
    """Erreur de conversion d'une cellule. Toujours rattachee a une ligne par l'importeur."""


class EmptyRequiredFieldError(FieldCoercionError):
    """Champ obligatoire vide."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Le champ obligatoire '{field_name}' ne peut pas etre vide.")


class InvalidBooleanValueError(FieldCoercionError):
    """Valeur booleenne non reconnue."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Valeur booleenne invalide: '{value}'. "
            "Utiliser 'true', 'false', 'yes', 'no', '1' ou '0'. "
            "Une valeur vide vaut 'false'."
        )


def coerce_string(value: str) -> Optional[str]:
    """Texte nettoye, ou None si vide."""
    cleaned = value.strip()
    return cleaned or None


def required_string(field_name: str):
    """
    Construit un convertisseur pour un texte obligatoire.

    Args:
        field_name: Nom affiche dans le message d'erreur

    Returns:
        Fonction levant EmptyRequiredFieldError sur une cellule vide
    """

    def coerce(value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise EmptyRequiredFieldError(field_name)
        return cleaned

    coerce.__name__ = "coerce_required_string"
    return coerce


def coerce_int(value: str) -> Optional[int]:
    """Entier, ou None si vide ou invalide (ex: "12.5", "abc")."""
    cleaned = value.strip()
    if not _INT_PATTERN.match(cleaned):
        return None
    return int(cleaned)


def coerce_float(value: str) -> Optional[float]:
    """Nombre decimal, ou None si vide ou invalide."""
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def coerce_percent_float(value: str) -> Optional[float]:
    """
    Note decimale acceptant les pourcentages.

    "95%" devient 9.5 (pourcentage ramene sur 10), "8.4" reste 8.4.

    Returns:
        La note, ou None si vide ou invalide
    """
    cleaned = value.strip()
    if cleaned.endswith("%"):
        percentage = coerce_float(cleaned[:-1])
        if percentage is not None:
            return percentage / 10.0
    return coerce_float(cleaned)


def coerce_air_date(value: str) -> Optional[str]:
    """Date de diffusion : MM/dd/yyyy devient yyyy-MM-dd, tout autre texte est garde tel quel."""
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        parsed = datetime.strptime(cleaned, AIR_DATE_INPUT_FORMAT)
    except ValueError:
        return cleaned
    return parsed.strftime(AIR_DATE_OUTPUT_FORMAT)


def coerce_bool(value: str) -> bool:
    """
    Booleen strict.

    Accepte (insensible a la casse) true/yes/1 et false/no/0.
    Une cellule vide vaut False.

    Raises:
        InvalidBooleanValueError: Pour tout autre litteral, avec la valeur
            telle que saisie
    """
    cleaned = value.strip()
    if cleaned.lower() in TRUE_LITERALS:
        return True
    if cleaned.lower() in FALSE_LITERALS:
        return False
    raise InvalidBooleanValueError(cleaned)
