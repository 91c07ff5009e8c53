"""
Tests pour les schemas d'import des films et series.
"""

import pytest

from mediashelf.core.entities import MovieRecord, TVShowRecord
from mediashelf.core.value_objects import ColumnSchema, ColumnSpec, MediaKind
from mediashelf.adapters.csv.coercers import coerce_string
from mediashelf.services.schemas import (
    MOVIE_SCHEMA,
    TV_SHOW_SCHEMA,
    describe_columns,
    get_schema,
)


class TestBuiltinSchemas:
    """Schemas livres avec l'application."""

    def test_movie_required_columns(self):
        assert [c.name for c in MOVIE_SCHEMA.required_columns] == ["title", "watched"]

    def test_tv_required_columns(self):
        assert [c.name for c in TV_SHOW_SCHEMA.required_columns] == ["name"]

    def test_tv_allowed_keys(self):
        assert TV_SHOW_SCHEMA.allowed_keys == {
            "name", "watched", "rating", "year", "genre", "overview", "seasons",
            "airdate", "tmdbid", "posterpath", "backdroppath", "creators", "cast",
            "status", "numberofseasons", "numberofepisodes", "tmdbrating",
        }

    def test_tv_genre_fills_genres(self):
        assert TV_SHOW_SCHEMA.find("Genre").field == "genres"

    def test_movie_allowed_keys_include_legacy(self):
        assert {"genre", "poster", "tmdbrating"} <= MOVIE_SCHEMA.allowed_keys

    def test_find_is_case_insensitive(self):
        assert MOVIE_SCHEMA.find("PosterPath").field == "poster_path"
        assert MOVIE_SCHEMA.find("poster").field == "poster_path"
        assert MOVIE_SCHEMA.find("foo") is None

    def test_record_factories(self):
        assert MOVIE_SCHEMA.record_factory is MovieRecord
        assert TV_SHOW_SCHEMA.record_factory is TVShowRecord

    def test_fields_exist_on_records(self):
        for schema in (MOVIE_SCHEMA, TV_SHOW_SCHEMA):
            record = schema.record_factory()
            for column in schema.columns:
                assert hasattr(record, column.field)


class TestGetSchema:
    """Tests pour get_schema."""

    def test_by_enum(self):
        assert get_schema(MediaKind.TV) is TV_SHOW_SCHEMA

    def test_by_value(self):
        assert get_schema("movies") is MOVIE_SCHEMA

    def test_kind_without_schema(self):
        with pytest.raises(ValueError, match="books"):
            get_schema(MediaKind.BOOKS)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            get_schema("vinyls")


class TestColumnSchema:
    """Tests pour ColumnSchema."""

    def test_duplicate_alias_is_rejected(self):
        with pytest.raises(ValueError, match="genre"):
            ColumnSchema(
                name="broken",
                record_factory=dict,
                columns=(
                    ColumnSpec("genres", "genres", coerce_string, aliases=("genre",)),
                    ColumnSpec("genre", "genre", coerce_string),
                ),
            )

    def test_schema_is_immutable(self):
        with pytest.raises(AttributeError):
            MOVIE_SCHEMA.name = "other"


class TestDescribeColumns:
    """Tests pour describe_columns."""

    def test_required_first(self):
        descriptions = describe_columns(MOVIE_SCHEMA)
        assert [d.required for d in descriptions[:2]] == [True, True]
        assert not any(d.required for d in descriptions[2:])

    def test_type_labels_and_aliases(self):
        by_name = {d.name: d for d in describe_columns(MOVIE_SCHEMA)}
        assert by_name["watched"].type_label == "true/false"
        assert by_name["year"].type_label == "nombre entier"
        assert by_name["tmdbRating"].type_label == "nombre"
        assert by_name["title"].type_label == "texte"
        assert by_name["genres"].aliases == ("genre",)

    def test_tv_type_labels(self):
        by_name = {d.name: d for d in describe_columns(TV_SHOW_SCHEMA)}
        assert by_name["watched"].required is False
        assert by_name["rating"].type_label == "nombre ou pourcentage"
        assert by_name["airDate"].type_label.startswith("date")
