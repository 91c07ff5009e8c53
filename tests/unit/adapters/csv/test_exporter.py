"""
Tests pour CSVExporter.

Verifie le format produit et la relecture par l'importeur.
"""

import pytest

from mediashelf.core.entities import MovieRecord, TVShowRecord
from mediashelf.core.value_objects import ImportSuccess
from mediashelf.services.schemas import MOVIE_SCHEMA, TV_SHOW_SCHEMA


@pytest.fixture
def movies() -> list[MovieRecord]:
    """Films varies : champs vides, virgules, nombres."""
    return [
        MovieRecord(
            title="Inception",
            watched=True,
            year=2010,
            rating=9.5,
            tmdb_rating=8.4,
            genres="Action, Science Fiction",
            runtime=148,
            cast="Leonardo DiCaprio, Elliot Page",
        ),
        MovieRecord(title="Arrival", watched=False, year=2016),
        MovieRecord(title="Alien, le 8e passager", watched=True),
    ]


class TestCSVExporter:
    """Tests pour CSVExporter.export."""

    def test_header_uses_canonical_names(self, exporter, movies):
        text = exporter.export(movies, MOVIE_SCHEMA)
        assert text.splitlines()[0] == (
            "title,watched,year,rating,tmdbRating,genres,runtime,overview,"
            "posterPath,backdropPath,releaseDate,tmdbId,directors,cast"
        )

    def test_row_format(self, exporter, movies):
        lines = exporter.export(movies, MOVIE_SCHEMA).splitlines()
        assert lines[2] == "Arrival,false,2016,,,,,,,,,,,"

    def test_commas_are_quoted(self, exporter, movies):
        lines = exporter.export(movies, MOVIE_SCHEMA).splitlines()
        assert lines[3].startswith('"Alien, le 8e passager",true')

    def test_no_records_gives_header_only(self, exporter):
        assert exporter.export([], MOVIE_SCHEMA).count("\n") == 1

    def test_quote_in_value_is_rejected(self, exporter):
        with pytest.raises(ValueError, match="title"):
            exporter.export([MovieRecord(title='The "Thing"', watched=True)], MOVIE_SCHEMA)

    def test_newline_in_value_is_rejected(self, exporter):
        with pytest.raises(ValueError):
            exporter.export(
                [MovieRecord(title="Dune", watched=True, overview="line1\nline2")], MOVIE_SCHEMA
            )


class TestRoundTrip:
    """Export puis import redonne les memes enregistrements."""

    def test_movies_round_trip(self, exporter, importer, movies):
        outcome = importer.import_text(exporter.export(movies, MOVIE_SCHEMA), MOVIE_SCHEMA)

        assert isinstance(outcome, ImportSuccess)
        assert outcome.count == len(movies)
        assert list(outcome.records) == movies

    def test_tv_shows_round_trip(self, exporter, importer):
        shows = [
            TVShowRecord(
                name="The Wire",
                watched=True,
                seasons="Season 1; Season 2",
                creators="David Simon",
                number_of_seasons=5,
                number_of_episodes=60,
                status="Ended",
                air_date="2002-06-02",
            ),
            TVShowRecord(name="Severance", watched=False, tmdb_rating=8.3),
        ]
        records = importer.parse(exporter.export(shows, TV_SHOW_SCHEMA), TV_SHOW_SCHEMA)
        assert records == shows
