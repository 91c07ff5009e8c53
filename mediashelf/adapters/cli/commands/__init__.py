"""Sous-package CLI commands - re-exporte les commandes publiques."""

from mediashelf.adapters.cli.commands.import_commands import (
    columns,
    import_csv,
    normalize_csv,
)
from mediashelf.adapters.cli.commands.search_commands import search

__all__ = [
    # import
    "import_csv",
    "columns",
    "normalize_csv",
    # search
    "search",
]
