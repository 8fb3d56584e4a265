import pytest

from app.utils.conditions import parse_conditions


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("clean, sealed", ["clean", "sealed"]),
        ("clean,sealed", ["clean", "sealed"]),
        ("  clean ,  sealed  ", ["clean", "sealed"]),
        ("clean, , sealed,", ["clean", "sealed"]),
        ("refrigerate", ["refrigerate"]),
    ],
)
def test_parse_conditions_trims_and_drops_empty_tokens(raw, expected):
    assert parse_conditions(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", ", ,"])
def test_parse_conditions_returns_none_when_nothing_left(raw):
    assert parse_conditions(raw) is None


def test_parse_conditions_keeps_order_and_duplicates():
    assert parse_conditions("b, a, b") == ["b", "a", "b"]
