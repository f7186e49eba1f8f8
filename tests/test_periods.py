from __future__ import annotations

import pytest

from chartwindow.data.periods import parse_period, window_length


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1w", 7),
        ("1m", 30),
        ("1M", 30),
        (" 3m ", 90),
        ("1y", 365),
        ("all", None),
        ("45", 45),
        ("1 month", 30),
        ("3 Months", 90),
        ("2 weeks", 14),
        ("10 days", 10),
        ("1 year", 365),
    ],
)
def test_parse_period(text: str, expected: int | None) -> None:
    assert parse_period(text) == expected


@pytest.mark.parametrize("text", ["", "forever", "1 fortnight", "m1", "-5"])
def test_parse_period_unknown(text: str) -> None:
    with pytest.raises(ValueError, match="Unknown period"):
        parse_period(text)


def test_window_length_all_uses_available() -> None:
    assert window_length("all", 123) == 123
    assert window_length("1w", 123) == 7
