import math

import pytest

from jsonld import parse_coordinate, sanitize_text


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Acme   Coffee  ", "Acme Coffee"),
        ("Line\none", "Lineone"),
        ("wide\u3000 space", "wide space"),
        ("Bell\x07 and \x9b escape", "Bell and escape"),
        ("", ""),
        (None, ""),
    ],
)
def test_sanitize_text(raw, expected):
    assert sanitize_text(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "  plain  ",
        "\x00\x01 leading controls",
        "trailing controls \x1f\x7f",
        "mixed \x85   spaces\r\n",
        "\n\n\n",
        "Кофейня  «Акме»",
    ],
)
def test_sanitize_text_is_idempotent(raw):
    once = sanitize_text(raw)
    assert sanitize_text(once) == once


def test_sanitize_text_stringifies_numbers():
    assert sanitize_text(42) == "42"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("34.0522", 34.0522),
        (" -118.2437 ", -118.2437),
        (0, 0.0),
        ("0", 0.0),
        (95, 95.0),
    ],
)
def test_parse_coordinate_accepts_numbers(raw, expected):
    assert parse_coordinate(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "north", "nan", "inf", True, [], {}])
def test_parse_coordinate_rejects_garbage(raw):
    assert parse_coordinate(raw) is None


def test_parse_coordinate_reads_numeric_prefix():
    assert parse_coordinate("40.7128°") == 40.7128
    assert parse_coordinate("-74.0060 W") == -74.006
    assert parse_coordinate("1_000") == 1.0
    assert parse_coordinate(".5") == 0.5
    assert parse_coordinate("°40") is None


def test_parse_coordinate_rejects_non_finite_float():
    assert parse_coordinate(math.inf) is None
    assert parse_coordinate(float("nan")) is None
