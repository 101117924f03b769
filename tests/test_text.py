"""
Tests for the debug-overlay string helpers.
"""

import pytest

from gamefmt.config.settings import Settings
from gamefmt.utils.text import (
    LabelValuePair,
    array_to_csv,
    get_debug_string,
    is_null_or_empty,
    to_float_list,
    to_int_list,
    to_title_case,
    to_underscore_case,
)


class TestCaseConversion:

    def test_is_null_or_empty(self):
        assert is_null_or_empty(None)
        assert is_null_or_empty("")
        assert not is_null_or_empty(" ")
        assert not is_null_or_empty("a")

    def test_title_case(self):
        """Only the first character of each word should change."""
        assert to_title_case("hello world") == "Hello World"
        assert to_title_case("hello mcFly") == "Hello McFly"
        assert to_title_case("") == ""

    def test_title_case_keeps_spacing(self):
        assert to_title_case("a  b") == "A  B"

    def test_underscore_case(self):
        assert to_underscore_case("Hello World") == "hello_world"
        assert to_underscore_case("Level 1 Boss") == "level_1_boss"


class TestNumberLists:
    """Test comma-separated number parsing."""

    def test_int_list(self):
        assert to_int_list("1,2,3") == [1, 2, 3]
        assert to_int_list("1, 2 , -3") == [1, 2, -3]

    def test_float_list(self):
        assert to_float_list("1.5,2") == [1.5, 2.0]

    def test_empty_gives_none(self):
        assert to_int_list("") is None
        assert to_int_list(None) is None
        assert to_float_list("") is None

    def test_malformed_entry_raises(self):
        with pytest.raises(ValueError):
            to_int_list("1,x,3")
        with pytest.raises(ValueError):
            to_float_list("1.5,,2")


class TestArrayToCsv:
    """Test tilemap CSV dumps."""

    def test_rows(self):
        assert array_to_csv([0, 1, 2, 1, 0, 3], 3) == "0, 1, 2\n1, 0, 3"

    def test_invert_swaps_zero_and_one(self):
        assert array_to_csv([0, 1, 2, 1, 0, 3], 3, invert=True) == "1, 0, 2\n0, 1, 3"

    def test_incomplete_row_ignored(self):
        assert array_to_csv([1, 2, 3, 4, 5], 2) == "1, 2\n3, 4"

    def test_empty(self):
        assert array_to_csv([], 4) == ""

    def test_single_column(self):
        assert array_to_csv([7, 8], 1) == "7\n8"

    def test_non_positive_width_raises(self):
        with pytest.raises(ValueError):
            array_to_csv([1, 2], 0)
        with pytest.raises(ValueError):
            array_to_csv([1, 2], -1)


class TestGetDebugString:
    """Test watch-panel debug strings."""

    def test_pairs_and_tuples(self):
        pairs = [LabelValuePair("x", 1.23456), ("visible", True), ("hp", 10)]
        assert get_debug_string(pairs) == "(x: 1.235 | visible: True | hp: 10)"

    def test_explicit_precision(self):
        assert get_debug_string([("x", 1.26)], precision=1) == "(x: 1.3)"

    def test_precision_from_settings(self, monkeypatch):
        monkeypatch.setattr(Settings, "DEBUG_PRECISION", 1)
        assert get_debug_string([("y", 2.04)]) == "(y: 2)"

    def test_integral_float_has_no_decimal_part(self):
        assert get_debug_string([("scale", 2.0)], precision=3) == "(scale: 2)"

    def test_non_finite_float_passed_through(self):
        assert get_debug_string([("v", float("nan"))], precision=3) == "(v: nan)"

    def test_huge_float_passed_through(self):
        """Floats that overflow when scaled should not raise."""
        assert get_debug_string([("v", 1e308)], precision=3) == "(v: 1e+308)"
        assert get_debug_string([("v", -1e308)], precision=3) == "(v: -1e+308)"

    def test_no_pairs(self):
        assert get_debug_string([]) == "()"

    def test_label_value_pair_is_immutable(self):
        pair = LabelValuePair("x", 1)
        with pytest.raises(AttributeError):
            pair.label = "y"
