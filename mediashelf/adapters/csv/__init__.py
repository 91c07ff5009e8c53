"""
Codec CSV de la mediatheque.

Ce module fournit:
- parse_delimited_line / tokenize_line: decoupage d'une ligne en cellules
- coerce_*: conversion des cellules en valeurs typees
- CSVExporter: serialisation d'enregistrements en texte CSV
"""

from .coercers import (
    EmptyRequiredFieldError,
    FieldCoercionError,
    InvalidBooleanValueError,
    coerce_bool,
    coerce_float,
    coerce_int,
    coerce_string,
    required_string,
)
from .exporter import CSVExporter
from .tokenizer import parse_delimited_line, tokenize_line

__all__ = [
    "parse_delimited_line",
    "tokenize_line",
    "coerce_bool",
    "coerce_float",
    "coerce_int",
    "coerce_string",
    "required_string",
    "FieldCoercionError",
    "EmptyRequiredFieldError",
    "InvalidBooleanValueError",
    "CSVExporter",
]
