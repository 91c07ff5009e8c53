"""
Tests pour les enregistrements de la mediatheque (MovieRecord, TVShowRecord).
"""

from mediashelf.core.entities import MovieRecord, TVShowRecord


class TestMovieRecord:
    """Tests pour MovieRecord."""

    def test_defaults(self):
        movie = MovieRecord(title="Dune")
        assert movie.watched is False
        assert movie.year is None
        assert movie.genre_list == []

    def test_list_properties(self):
        movie = MovieRecord(
            title="Inception",
            genres="Action, Science Fiction",
            directors="Christopher Nolan",
            cast="Leonardo DiCaprio, Elliot Page, ",
        )
        assert movie.genre_list == ["Action", "Science Fiction"]
        assert movie.director_list == ["Christopher Nolan"]
        assert movie.cast_list == ["Leonardo DiCaprio", "Elliot Page"]


class TestTVShowRecord:
    """Tests pour TVShowRecord."""

    def test_season_list_uses_semicolons(self):
        show = TVShowRecord(name="The Wire", seasons="Season 1; Season 2; Season 3")
        assert show.season_list == ["Season 1", "Season 2", "Season 3"]

    def test_empty_lists(self):
        show = TVShowRecord(name="Severance")
        assert show.season_list == []
        assert show.creator_list == []
