import math
from decimal import Decimal

import pytest

from utils import format_floats, format_number
from utils.formatters import UNITS


@pytest.mark.parametrize(
    "floats, precision, expected",
    [
        ({"foo": 3.14}, 0, {"foo": 3}),
        ([3.14], 0, [3]),
        ({"bar": 10.00}, 0, {"bar": 10}),
        ({"foo": 3.1415, "bar": 10.00}, 2, {"foo": 3.14, "bar": 10}),
        ({"foo": float("nan"), "bar": 3.1415}, 3, {"foo": 0, "bar": 3.141}),
        ([float("nan"), 3.1415], 3, [0, 3.141]),
    ],
)
def test_format_floats_documented_examples(floats, precision, expected):
    assert format_floats(floats, precision) == expected


def test_format_floats_replaces_non_numbers_with_zero():
    result = format_floats({"inf": float("inf"), "ninf": float("-inf"), "s": "3", "n": None, "flag": True}, 2)
    assert result == {"inf": 0, "ninf": 0, "s": 0, "n": 0, "flag": 0}


def test_format_floats_keeps_container_shape():
    assert format_floats({}) == {}
    assert format_floats([]) == []
    assert format_floats(None) == {}
    assert format_floats((1.26, 2.71), 1) == [1.3, 2.7]


def test_format_floats_does_not_mutate_input():
    data = {"a": 1.2345, "b": float("nan")}
    format_floats(data, 2)
    assert data["a"] == 1.2345
    assert math.isnan(data["b"])


def test_format_floats_rounding_details():
    result = format_floats([-2.567, -0.001, 2.7, Decimal("1.26"), 7], 2)
    assert result[0] == -2.57
    assert result[2] == 2.7
    assert result[3] == 1.26
    assert result[4] == 7

    negative_zero = format_floats([-0.001])[0]
    assert negative_zero == 0
    assert math.copysign(1.0, negative_zero) == 1.0


def test_format_floats_handles_huge_values():
    assert format_floats([1e300], 2) == [1e300]
    assert format_floats([10 ** 30], 0) == [1e30]


@pytest.mark.parametrize("precision", [0, 1, 2, 3])
def test_format_floats_is_idempotent(precision):
    data = {"a": 3.14159, "b": -2.71828, "c": 1234.5678, "d": 0.0049}
    once = format_floats(data, precision)
    assert format_floats(once, precision) == once


@pytest.mark.parametrize(
    "value, padding, expected",
    [
        (1000, 0, "1,000"),
        (1, 2, "01"),
        (1, 4, "0001"),
        (0, 2, "0"),
        (float("nan"), 2, "0"),
        (1234567, 0, "1,234,567"),
        (999, 0, "999"),
        (-1234, 0, "-1,234"),
        (1000.0, 0, "1,000"),
        (123, 2, "123"),
        (-5, 3, "0"),
        (1234, 6, "001,234"),
        (float("inf"), 0, "0"),
        ("1000", 0, "0"),
        (None, 0, "0"),
    ],
)
def test_format_number(value, padding, expected):
    assert format_number(value, padding) == expected


def test_format_number_default_padding():
    assert format_number(5) == "5"
    assert format_number(0) == "0"


def test_units_are_ordered_smallest_first():
    assert UNITS == ("b", "kb", "mb", "gb", "tb", "pb", "eb")


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (2.5, 0, 2),
        (-2.5, 0, -2),
        (0.5, 0, 0),
        (1.25, 1, 1.2),
        (3.1415, 3, 3.141),
        (2.51, 0, 3),
    ],
)
def test_format_floats_ties_round_towards_zero(value, precision, expected):
    assert format_floats([value], precision) == [expected]


def test_format_number_small_float_keeps_python_notation():
    assert format_number(1e-7) == "1e-07"
