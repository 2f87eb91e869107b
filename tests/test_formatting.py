from decimal import Decimal

import pytest

from afv.services.formatting import format_points, format_rounded, round_points


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("0.5"), Decimal("1")),
        (Decimal("1.5"), Decimal("2")),
        (Decimal("2.4999"), Decimal("2")),
        (Decimal("-1.5"), Decimal("-2")),
        (Decimal("-0.4"), Decimal("0")),
        (1099.6, Decimal("1100")),
    ],
)
def test_round_points_half_away_from_zero(value, expected):
    assert round_points(value) == expected


def test_round_points_has_no_negative_zero():
    assert str(round_points(Decimal("-0.2"))) == "0"


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (1234567, "1,234,567"),
        (Decimal("1234.5"), "1,234.5"),
        (Decimal("0.12345"), "0.123"),
        (Decimal("2.0005"), "2.001"),
        (Decimal("-30"), "-30"),
        (Decimal("-1234.25"), "-1,234.25"),
        (Decimal("1E+3"), "1,000"),
    ],
)
def test_format_points_defaults(value, expected):
    assert format_points(value) == expected


def test_format_points_custom_separators():
    out = format_points(Decimal("1234567.5"), thousands_sep=".", decimal_sep=",")
    assert out == "1.234.567,5"


def test_format_points_zero_fraction_digits():
    assert format_points(Decimal("1234.5"), max_fraction_digits=0) == "1,235"


def test_format_rounded():
    assert format_rounded(Decimal("1299.5")) == "1,300"
    assert format_rounded(Decimal("-99.5")) == "-100"


def test_format_points_huge_values():
    assert format_points(Decimal("1e30")) == "1" + ",000" * 10
    assert format_points(Decimal("1" + "0" * 30 + ".5")) == "1" + ",000" * 10 + ".5"
    assert format_rounded(Decimal("-1" + "0" * 30 + ".5")) == "-1" + ",000" * 9 + ",001"


def test_round_points_huge_value():
    assert round_points(Decimal("1" + "0" * 30 + ".5")) == Decimal("1" + "0" * 29 + "1")
