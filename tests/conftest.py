"""
Fixtures pytest partagees pour les tests MediaShelf.

Ce module contient les fixtures communes utilisees dans les tests:
- Services sans etat (importeur CSV, classement, export)
- Contenus CSV de reference
"""

import pytest

from mediashelf.adapters.csv.exporter import CSVExporter
from mediashelf.services.csv_importer import CSVImporterService
from mediashelf.services.similarity import RelevanceRanker


@pytest.fixture
def importer() -> CSVImporterService:
    """Service d'import CSV."""
    return CSVImporterService()


@pytest.fixture
def ranker() -> RelevanceRanker:
    """Service de classement par pertinence."""
    return RelevanceRanker()


@pytest.fixture
def exporter() -> CSVExporter:
    """Exporteur CSV."""
    return CSVExporter()


@pytest.fixture
def full_movie_csv() -> str:
    """CSV de films utilisant toutes les colonnes supportees."""
    return (
        "title,watched,year,rating,tmdbRating,genres,runtime,overview,"
        "posterPath,backdropPath,releaseDate,tmdbId,directors,cast\n"
        'Inception,true,2010,9.5,8.4,"Action, Science Fiction",148,'
        "A thief who steals corporate secrets,/inception.jpg,/inception_bd.jpg,"
        '2010-07-16,27205,Christopher Nolan,"Leonardo DiCaprio, Elliot Page"\n'
        "Arrival,no,2016,,7.6,Drama,116,,,,,329865,Denis Villeneuve,\n"
    )
