"""Tests for point and DataSeries extraction."""

import locale

import numpy as np
import pytest

from bhom_converter.models import DataSeries, Point2D
from bhom_converter.processors.converters import (
    extract_point,
    extract_series,
    to_float,
)
from bhom_converter.utils import JsonNumber


# ── to_float ─────────────────────────────────────────────────────────

class TestToFloat:

    def test_number(self):
        assert to_float(JsonNumber("3")) == 3.0

    def test_numeric_string(self):
        assert to_float("2.5") == 2.5
        assert to_float(" -1e3 ") == -1000.0

    def test_non_numeric(self):
        assert to_float("abc") is None
        assert to_float(True) is None
        assert to_float(None) is None
        assert to_float([1]) is None

    def test_c_locale_rejects_comma_decimal(self):
        locale.setlocale(locale.LC_NUMERIC, "C")
        assert to_float("1,5") is None

    def test_comma_decimal_locale(self, comma_decimal_locale):
        assert to_float("1,5") == 1.5
        assert to_float("2.5") == 2.5

    def test_python_only_spellings_rejected(self, comma_decimal_locale):
        assert to_float("1_000") is None
        assert to_float("1_5") is None

    def test_python_only_spellings_rejected_in_c_locale(self):
        locale.setlocale(locale.LC_NUMERIC, "C")
        assert to_float("1_000") is None

    def test_invariant_special_values(self):
        assert to_float("Infinity") == float("inf")
        assert to_float("NaN") != to_float("NaN")


# ── extract_point ────────────────────────────────────────────────────

class TestExtractPoint:

    def test_lowercase_object(self, parse):
        assert extract_point(parse('{"x": 1, "y": 2}')) == Point2D(1, 2)

    def test_uppercase_object(self, parse):
        assert extract_point(parse('{"X": "1.5", "Y": "2"}')) == Point2D(1.5, 2.0)

    def test_extra_members_ignored(self, parse):
        assert extract_point(parse('{"x": 1, "y": 2, "label": "a"}')) == Point2D(1, 2)

    def test_pair_array(self, parse):
        assert extract_point(parse("[1, 2]")) == Point2D(1, 2)

    def test_missing_y(self, parse):
        assert extract_point(parse('{"x": 1}')) is None

    def test_unparsable_value(self, parse):
        assert extract_point(parse('{"x": "abc", "y": 1}')) is None

    def test_wrong_array_length(self, parse):
        assert extract_point(parse("[1, 2, 3]")) is None
        assert extract_point(parse("[1]")) is None

    def test_scalar_is_not_point(self, parse):
        assert extract_point(parse("5")) is None
        assert extract_point(parse('"1,2"')) is None

    def test_point_is_immutable(self):
        p = Point2D(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5


# ── extract_series ───────────────────────────────────────────────────

class TestExtractSeries:

    def test_array_of_pairs(self, parse):
        series = extract_series(parse("[[1, 2], [3, 4]]"))
        assert isinstance(series, DataSeries)
        assert series.data_points == [Point2D(1, 2), Point2D(3, 4)]

    def test_data_member(self, parse):
        series = extract_series(parse('{"Data": [[1, 2]]}'))
        assert series.data_points == [Point2D(1, 2)]

    def test_single_point_object(self, parse):
        series = extract_series(parse('{"x": 7, "y": 8}'))
        assert series.data_points == [Point2D(7, 8)]

    def test_empty_object_invalid(self, parse):
        assert extract_series(parse("{}")) is None

    def test_empty_array_invalid(self, parse):
        assert extract_series(parse("[]")) is None

    def test_invalid_items_skipped(self, parse):
        series = extract_series(parse('[[1, 2], "junk", {"x": 5, "y": 6}, [1]]'))
        assert series.data_points == [Point2D(1, 2), Point2D(5, 6)]

    def test_all_items_invalid(self, parse):
        assert extract_series(parse('["a", [1, 2, 3]]')) is None

    def test_data_member_is_case_sensitive(self, parse):
        assert extract_series(parse('{"data": [[1, 2]]}')) is None

    def test_empty_data_falls_back_to_single_point(self, parse):
        series = extract_series(parse('{"Data": [], "x": 1, "y": 2}'))
        assert series.data_points == [Point2D(1, 2)]

    def test_non_array_data_falls_back_to_single_point(self, parse):
        series = extract_series(parse('{"Data": "n/a", "X": 3, "Y": 4}'))
        assert series.data_points == [Point2D(3, 4)]

    def test_scalar_root_invalid(self, parse):
        assert extract_series(parse('"text"')) is None

    def test_name_assigned(self, parse):
        series = extract_series(parse("[[0, 0]]"), name="pump_curve")
        assert series.name == "pump_curve"

    def test_to_array(self, parse):
        arr = extract_series(parse("[[1, 2], [3, 4]]")).to_array()
        assert arr.shape == (2, 2)
        np.testing.assert_allclose(arr[:, 1], [2.0, 4.0])

    def test_empty_series_array_shape(self):
        assert DataSeries().to_array().shape == (0, 2)
