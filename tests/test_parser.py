"""Tests for the chart data parser."""

from __future__ import annotations

import pytest

from svgplot.core.models import Point
from svgplot.core.parser import (
    parse_bar_data,
    parse_pairs,
    parse_values,
    scan_pairs,
    scan_values,
)


# ---------------------------------------------------------------------------
# parse_values
# ---------------------------------------------------------------------------

class TestParseValues:
    def test_simple_list(self):
        assert parse_values("1,2,3") == [1, 2, 3]

    def test_invalid_token_dropped(self):
        assert parse_values("1,x,3") == [1, 3]

    def test_empty_string(self):
        assert parse_values("") == []

    def test_only_separators(self):
        assert parse_values(",,,") == []

    def test_whitespace_around_tokens(self):
        assert parse_values(" 1.5 , 2 ,\t3") == [1.5, 2.0, 3.0]

    def test_negative_and_exponent(self):
        assert parse_values("-4,1e3,.5") == [-4.0, 1000.0, 0.5]

    @pytest.mark.parametrize("token", ["nan", "inf", "-inf"])
    def test_non_finite_dropped(self, token):
        assert parse_values(f"1,{token},2") == [1.0, 2.0]

    def test_all_invalid(self):
        assert parse_values("a,b,c") == []

    def test_leading_number_kept(self):
        assert parse_values("10px,20,3.5abc") == [10.0, 20.0, 3.5]

    @pytest.mark.parametrize("token", ["px10", "-", ".", "e5", "+x"])
    def test_no_leading_number_dropped(self, token):
        assert parse_values(token) == []

    def test_incomplete_exponent(self):
        assert parse_values("1e,2E+") == [1.0, 2.0]

    def test_overflowing_token_dropped(self):
        assert parse_values("1e999,5") == [5.0]


# ---------------------------------------------------------------------------
# parse_pairs
# ---------------------------------------------------------------------------

class TestParsePairs:
    def test_simple_pairs(self):
        assert parse_pairs("1:2,3:4") == [(1, 2), (3, 4)]

    def test_token_without_separator_dropped(self):
        assert parse_pairs("1:2,bad,3:4") == [(1, 2), (3, 4)]

    def test_non_numeric_half_dropped(self):
        assert parse_pairs("1:a,b:2,5:6") == [(5, 6)]

    def test_returns_points(self):
        points = parse_pairs("1.5:-2")
        assert isinstance(points[0], Point)
        x, y = points[0]
        assert (x, y) == (1.5, -2.0)

    def test_extra_colon_keeps_leading_number(self):
        assert parse_pairs("1:2:3,4:5") == [(1, 2), (4, 5)]

    def test_trailing_text_in_pair(self):
        assert parse_pairs("1px:2em,3:4") == [(1, 2), (3, 4)]

    def test_empty(self):
        assert parse_pairs("") == []
        assert parse_pairs(",") == []


# ---------------------------------------------------------------------------
# Bar input
# ---------------------------------------------------------------------------

class TestParseBarData:
    def test_values_get_index_as_x(self):
        assert parse_bar_data("10,20,15") == [(0, 10), (1, 20), (2, 15)]

    def test_pairs_used_when_colon_present(self):
        assert parse_bar_data("5:10,6:20") == [(5, 10), (6, 20)]

    def test_mixed_input_parsed_as_pairs(self):
        # Once a colon appears, plain values are malformed pairs
        assert parse_bar_data("10,2:20") == [(2, 20)]


# ---------------------------------------------------------------------------
# Discard counts
# ---------------------------------------------------------------------------

class TestScanReports:
    def test_prefixed_tokens_not_counted(self):
        report = scan_values("10px,x")
        assert report.values == [10.0]
        assert report.discarded == 1

    def test_value_discards_counted(self):
        report = scan_values("1,x,3,y")
        assert report.values == [1.0, 3.0]
        assert report.discarded == 2

    def test_pair_discards_counted(self):
        report = scan_pairs("1:2,bad,3:x")
        assert len(report.points) == 1
        assert report.discarded == 2

    def test_empty_tokens_not_counted(self):
        report = scan_values("1,,2,")
        assert report.discarded == 0

    def test_empty_report(self):
        assert scan_values("").empty
        assert not scan_values("1").empty
