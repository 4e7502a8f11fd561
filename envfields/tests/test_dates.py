from __future__ import annotations

import pytest

from envfields.config import dates


@pytest.mark.parametrize(
    ("value", "mask"),
    [
        ("2024-01-15", "YYYY-MM-DD"),
        ("2024-02-29", "YYYY-MM-DD"),
        ("15/01/2024", "DD/MM/YYYY"),
        ("1/5/24", "D/M/YY"),
        ("2024-01-15T08:30:00", "YYYY-MM-DD[T]HH:mm:ss"),
        ("20240115", "YYYYMMDD"),
        ("23:59", "HH:mm"),
    ],
)
def test_valid_dates_match(value: str, mask: str) -> None:
    """Values that fit the mask and name a real date are accepted."""
    assert dates.is_valid_date_string(value, mask) is True


@pytest.mark.parametrize(
    ("value", "mask"),
    [
        ("2024-1-15", "YYYY-MM-DD"),
        ("2024-02-30", "YYYY-MM-DD"),
        ("2023-02-29", "YYYY-MM-DD"),
        ("2024-13-01", "YYYY-MM-DD"),
        ("2024-01-15 ", "YYYY-MM-DD"),
        ("not-a-date", "YYYY-MM-DD"),
        ("2024/01/15", "YYYY-MM-DD"),
        ("24:00", "HH:mm"),
        ("", "YYYY-MM-DD"),
        (None, "YYYY-MM-DD"),
        (20240115, "YYYYMMDD"),
    ],
)
def test_invalid_dates_do_not_match(value, mask: str) -> None:
    assert dates.is_valid_date_string(value, mask) is False


def test_two_digit_years_pivot_on_68() -> None:
    """YY values up to 68 land in the 2000s, later ones in the 1900s."""
    # 2068 is a leap year, 1969 is not.
    assert dates.is_valid_date_string("68-02-29", "YY-MM-DD") is True
    assert dates.is_valid_date_string("69-02-29", "YY-MM-DD") is False


def test_repeated_components_must_agree() -> None:
    mask = "YYYY-MM-DD (MM)"
    assert dates.is_valid_date_string("2024-03-01 (03)", mask) is True
    assert dates.is_valid_date_string("2024-03-01 (04)", mask) is False


def test_compile_mask_escapes_literals() -> None:
    compiled = dates.compile_mask("YYYY.MM.DD")

    assert compiled.components == ("year", "month", "day")
    assert compiled.matches("2024.01.15") is True
    assert compiled.matches("2024x01x15") is False
    assert dates.compile_mask("YYYY.MM.DD") is compiled
