"""Tests for the single-token field validators."""

from __future__ import annotations

import pytest

from src.instruction.errors import InstructionError
from src.instruction.validators import (
    parse_account_id,
    parse_amount,
    parse_currency,
    parse_date,
)


def _code_of(func, token) -> str:
    with pytest.raises(InstructionError) as exc_info:
        func(token)
    return exc_info.value.code


def test_amount_accepts_positive_integer() -> None:
    assert parse_amount("100") == 100
    assert parse_amount("1") == 1


@pytest.mark.parametrize("token", ["10.5", "0", "-5", "", None, "abc", "100abc", "1e3"])
def test_amount_rejects_invalid_values(token: str | None) -> None:
    assert _code_of(parse_amount, token) == "AM01"


def test_amount_beyond_int_digit_cap_is_invalid_amount() -> None:
    assert _code_of(parse_amount, "1" * 5000) == "AM01"


def test_date_has_no_year_bound() -> None:
    assert parse_date("0000-01-01") == "0000-01-01"


def test_currency_is_normalized_to_uppercase() -> None:
    assert parse_currency("ngn") == "NGN"
    assert parse_currency("Usd") == "USD"
    assert parse_currency("GHS") == "GHS"


@pytest.mark.parametrize("token", ["XYZ", "EUR", "", None, "US"])
def test_currency_rejects_unsupported_codes(token: str | None) -> None:
    assert _code_of(parse_currency, token) == "CU02"


def test_date_accepts_iso_day() -> None:
    assert parse_date("2024-01-15") == "2024-01-15"


def test_date_is_lenient_about_days_in_month() -> None:
    # Only 1..31 is enforced; calendar validity is not.
    assert parse_date("2024-02-30") == "2024-02-30"
    assert parse_date("2023-04-31") == "2023-04-31"


@pytest.mark.parametrize(
    "token",
    [
        "2024-13-01",
        "2024-00-10",
        "2024-01-32",
        "2024-01-00",
        "2024/01/01",
        "24-01-01",
        "2024-1-1",
        "20a4-01-01",
        "",
        None,
    ],
)
def test_date_rejects_invalid_values(token: str | None) -> None:
    assert _code_of(parse_date, token) == "DT01"


def test_account_id_accepts_allowed_characters() -> None:
    assert parse_account_id("acct-1@bank.com") == "acct-1@bank.com"
    assert parse_account_id("A1") == "A1"


@pytest.mark.parametrize("token", ["acct#1", "acct_1", "a b", "", None, "naïve"])
def test_account_id_rejects_disallowed_characters(token: str | None) -> None:
    assert _code_of(parse_account_id, token) == "AC04"
