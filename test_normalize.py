#!/usr/bin/env python3
"""
Tests for counting and summing fields that may be absent, single or repeated.
"""

import pytest

from fl_player_stats.errors import SaveFieldError
from fl_player_stats.formats.fields import ABSENT, Scalar, ValueList
from fl_player_stats.stats.normalize import count_values, pair_count, parse_int, sum_pair_counts


def test_count_modes():
    assert count_values(ABSENT) == 0
    assert count_values(Scalar("2745934752")) == 1
    assert count_values(ValueList(("a", "b", "c", "d"))) == 4


def test_sum_modes():
    assert sum_pair_counts(ValueList(("a,3", "b,5"))) == 8
    assert sum_pair_counts(Scalar("a,7")) == 7
    assert sum_pair_counts(ABSENT) == 0


def test_sum_ignores_identifier_and_whitespace():
    field = ValueList(("2868113408, 4", "-1948497280, 11"))
    assert sum_pair_counts(field) == 15


def test_pair_count_uses_second_component_only():
    assert pair_count("12,3,99") == 3


def test_pair_without_comma_is_an_error():
    with pytest.raises(SaveFieldError) as excinfo:
        sum_pair_counts(ValueList(("a,3", "broken")))
    assert excinfo.value.value == "broken"


def test_pair_with_non_numeric_count_is_an_error():
    with pytest.raises(SaveFieldError):
        sum_pair_counts(Scalar("a,many"))


def test_parse_int_is_lenient_about_trailing_text():
    assert parse_int(" 3") == 3
    assert parse_int("12.5") == 12
    assert parse_int("-40") == -40


def test_parse_int_rejects_text():
    with pytest.raises(SaveFieldError):
        parse_int("rich")
