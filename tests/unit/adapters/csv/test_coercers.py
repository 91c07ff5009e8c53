"""
Tests pour les fonctions de conversion des cellules CSV.
"""

import pytest

from mediashelf.adapters.csv.coercers import (
    EmptyRequiredFieldError,
    FieldCoercionError,
    InvalidBooleanValueError,
    coerce_air_date,
    coerce_bool,
    coerce_float,
    coerce_int,
    coerce_percent_float,
    coerce_string,
    required_string,
)


class TestCoerceString:
    """Tests pour coerce_string et required_string."""

    def test_trimmed_value(self):
        assert coerce_string("  Dune  ") == "Dune"

    def test_empty_is_none(self):
        assert coerce_string("   ") is None

    def test_required_string_returns_value(self):
        assert required_string("title")(" Dune ") == "Dune"

    def test_required_string_rejects_empty(self):
        with pytest.raises(EmptyRequiredFieldError) as exc_info:
            required_string("title")("  ")
        assert exc_info.value.field_name == "title"
        assert "'title'" in str(exc_info.value)


class TestCoerceNumbers:
    """Tests pour coerce_int et coerce_float."""

    @pytest.mark.parametrize("raw, expected", [("2010", 2010), (" 148 ", 148), ("-3", -3), ("+7", 7)])
    def test_int_values(self, raw, expected):
        assert coerce_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "12.5", "abc", "1_000", "2O10"])
    def test_int_invalid_is_none(self, raw):
        assert coerce_int(raw) is None

    @pytest.mark.parametrize("raw, expected", [("8.4", 8.4), ("7", 7.0), ("-0.5", -0.5)])
    def test_float_values(self, raw, expected):
        assert coerce_float(raw) == expected

    @pytest.mark.parametrize("raw", ["", "  ", "great", "8,4"])
    def test_float_invalid_is_none(self, raw):
        assert coerce_float(raw) is None


class TestCoerceBool:
    """Tests pour coerce_bool."""

    @pytest.mark.parametrize("raw", ["true", "TRUE", "Yes", "1", " yes "])
    def test_true_literals(self, raw):
        assert coerce_bool(raw) is True

    @pytest.mark.parametrize("raw", ["false", "No", "0", "", "  "])
    def test_false_literals(self, raw):
        assert coerce_bool(raw) is False

    @pytest.mark.parametrize("raw", ["maybe", "y", "2", "oui"])
    def test_unknown_literal_raises(self, raw):
        with pytest.raises(InvalidBooleanValueError) as exc_info:
            coerce_bool(raw)
        assert exc_info.value.value == raw
        assert f"'{raw}'" in str(exc_info.value)

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidBooleanValueError, FieldCoercionError)
        assert issubclass(EmptyRequiredFieldError, ValueError)

    def test_error_keeps_value_as_typed(self):
        with pytest.raises(InvalidBooleanValueError) as exc_info:
            coerce_bool("  Maybe ")
        assert exc_info.value.value == "Maybe"
        assert "'Maybe'" in str(exc_info.value)


class TestCoercePercentFloat:
    """Tests pour coerce_percent_float."""

    @pytest.mark.parametrize("raw, expected", [("95%", 9.5), (" 80% ", 8.0), ("8.4", 8.4), ("7", 7.0)])
    def test_values(self, raw, expected):
        assert coerce_percent_float(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "%", "great%", "great"])
    def test_invalid_is_none(self, raw):
        assert coerce_percent_float(raw) is None


class TestCoerceAirDate:
    """Tests pour coerce_air_date."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("09/22/2004", "2004-09-22"), (" 1/5/2010 ", "2010-01-05"), ("12/31/1999", "1999-12-31")],
    )
    def test_us_dates_are_normalized(self, raw, expected):
        assert coerce_air_date(raw) == expected

    @pytest.mark.parametrize("raw", ["2004-09-22", "Fall 2004", "13/40/2004"])
    def test_other_text_is_kept(self, raw):
        assert coerce_air_date(raw) == raw

    def test_empty_is_none(self):
        assert coerce_air_date("  ") is None
