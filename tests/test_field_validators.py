"""
tests/test_field_validators.py

Pytest unit tests for the stateless field validators.

Coverage
--------
- Date: ISO parsing, strict padding, impossible dates, multi-format order
- TransactionID: exact-length and charset/max-length policies
- Amount: exact decimals, positivity, scale, grammar
- Currency: case policies, allow-lists, injected catalogs
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from txn_validation.config import LENIENT_DATE_FORMATS, LENIENT_TRANSACTION_ID_PATTERN
from txn_validation.reference.currencies import ISO_4217_CODES, StaticCurrencyCatalog
from txn_validation.validators.field_validators import (
    FieldCheck,
    decimal_scale,
    describe_date_format,
    validate_amount,
    validate_currency,
    validate_date,
    validate_transaction_id,
)

ISO_ONLY = ("%Y-%m-%d",)


def _joined(check: FieldCheck) -> str:
    return " | ".join(check.failures)


# ---------------------------------------------------------------------------
# FieldCheck
# ---------------------------------------------------------------------------


class TestFieldCheck:
    def test_success_is_ok(self) -> None:
        check = FieldCheck.success(5)
        assert check.ok
        assert check.value == 5

    def test_failure_is_not_ok(self) -> None:
        check = FieldCheck.failure("bad", "worse")
        assert not check.ok
        assert check.value is None
        assert check.failures == ("bad", "worse")


# ---------------------------------------------------------------------------
# Date
# ---------------------------------------------------------------------------


class TestValidateDate:
    def test_iso_date_parses(self) -> None:
        check = validate_date("2024-01-15", date_formats=ISO_ONLY)
        assert check.ok
        assert check.value == date(2024, 1, 15)

    def test_empty_is_required(self) -> None:
        assert validate_date("", date_formats=ISO_ONLY).failures == ("Date is required",)

    @pytest.mark.parametrize("raw", ["15-Jan-2024", "01-15-2024", "2024/01/16", "2024-1-5", "2024-02-30", "tomorrow"])
    def test_invalid_dates_name_expected_format(self, raw: str) -> None:
        check = validate_date(raw, date_formats=ISO_ONLY)
        assert not check.ok
        assert "Invalid date format" in _joined(check)
        assert "YYYY-MM-DD" in _joined(check)

    def test_leap_day_is_valid(self) -> None:
        assert validate_date("2024-02-29", date_formats=ISO_ONLY).value == date(2024, 2, 29)

    def test_day_first_format_wins_over_month_first(self) -> None:
        check = validate_date("03/04/2024", date_formats=LENIENT_DATE_FORMATS)
        assert check.value == date(2024, 4, 3)

    def test_month_first_used_when_day_first_fails(self) -> None:
        check = validate_date("01/15/2024", date_formats=LENIENT_DATE_FORMATS)
        assert check.value == date(2024, 1, 15)

    def test_failure_lists_every_format(self) -> None:
        check = validate_date("2024.01.15", date_formats=LENIENT_DATE_FORMATS)
        assert "YYYY-MM-DD or DD/MM/YYYY or MM/DD/YYYY" in _joined(check)

    def test_describe_date_format(self) -> None:
        assert describe_date_format("%d/%m/%Y") == "DD/MM/YYYY"


# ---------------------------------------------------------------------------
# TransactionID
# ---------------------------------------------------------------------------


class TestValidateTransactionId:
    def test_exact_length_accepts_ten_characters(self) -> None:
        check = validate_transaction_id("TXN1234567", exact_length=10)
        assert check.ok
        assert check.value == "TXN1234567"

    def test_empty_is_required(self) -> None:
        assert validate_transaction_id("", exact_length=10).failures == ("TransactionID is required",)

    @pytest.mark.parametrize("raw", ["TXN123", "TXN12345678901"])
    def test_exact_length_rejects_other_lengths(self, raw: str) -> None:
        check = validate_transaction_id(raw, exact_length=10)
        assert "exactly 10 characters" in _joined(check)
        assert f"({len(raw)} characters)" in _joined(check)

    @pytest.mark.parametrize("raw", ["TXN-001_a", "a", "A" * 100])
    def test_lenient_policy_accepts_charset_within_bound(self, raw: str) -> None:
        check = validate_transaction_id(raw, max_length=100, pattern=LENIENT_TRANSACTION_ID_PATTERN)
        assert check.ok

    def test_lenient_policy_rejects_overlong(self) -> None:
        check = validate_transaction_id("A" * 101, max_length=100, pattern=LENIENT_TRANSACTION_ID_PATTERN)
        assert "at most 100 characters" in _joined(check)

    @pytest.mark.parametrize("raw", ["TXN 001", "TXN@1", "TXN.1"])
    def test_lenient_policy_rejects_other_characters(self, raw: str) -> None:
        check = validate_transaction_id(raw, max_length=100, pattern=LENIENT_TRANSACTION_ID_PATTERN)
        assert "letters, digits, underscores and hyphens" in _joined(check)


# ---------------------------------------------------------------------------
# Amount
# ---------------------------------------------------------------------------


class TestValidateAmount:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("100.50", Decimal("100.50")),
            ("50.5", Decimal("50.5")),
            ("1", Decimal("1")),
            ("0.01", Decimal("0.01")),
            ("000123.40", Decimal("123.40")),
        ],
    )
    def test_valid_amounts_parse_as_decimal(self, raw: str, expected: Decimal) -> None:
        check = validate_amount(raw)
        assert check.ok
        assert isinstance(check.value, Decimal)
        assert check.value == expected

    def test_scale_is_preserved(self) -> None:
        assert str(validate_amount("100.50").value) == "100.50"

    def test_empty_is_required(self) -> None:
        assert validate_amount("").failures == ("Amount is required",)

    @pytest.mark.parametrize("raw", ["1.234", "0.001", "100.000", "9.99999", "0.000"])
    def test_three_or_more_decimals_rejected(self, raw: str) -> None:
        assert "too many decimal places" in _joined(validate_amount(raw))

    @pytest.mark.parametrize("raw", ["0", "0.00", "-5", "-0.01", "-1.234", "-abc", "-"])
    def test_zero_and_negative_rejected_as_not_positive(self, raw: str) -> None:
        assert "must be positive" in _joined(validate_amount(raw))

    def test_negative_with_too_many_decimals_reports_both(self) -> None:
        joined = _joined(validate_amount("-1.234"))
        assert "must be positive" in joined
        assert "too many decimal places" in joined

    @pytest.mark.parametrize("raw", ["abc", "1,000", "+5", "1e3", "12.", ".5", "NaN", "Infinity", "1.2.3"])
    def test_non_numeric_rejected(self, raw: str) -> None:
        assert "Amount must be a number" in _joined(validate_amount(raw))

    def test_decimal_scale_counts_written_digits(self) -> None:
        assert decimal_scale(Decimal("1.500")) == 3
        assert decimal_scale(Decimal("15")) == 0


# ---------------------------------------------------------------------------
# Currency
# ---------------------------------------------------------------------------


class _SingleCodeCatalog:
    def is_supported(self, code: str) -> bool:
        return code == "XTS"

    def describe(self) -> str:
        return "XTS"


class TestValidateCurrency:
    @pytest.fixture()
    def catalog(self) -> StaticCurrencyCatalog:
        return StaticCurrencyCatalog({"USD", "EUR", "INR"})

    def test_allowed_code(self, catalog: StaticCurrencyCatalog) -> None:
        assert validate_currency("USD", catalog=catalog).value == "USD"

    def test_lowercase_normalized_when_case_insensitive(self, catalog: StaticCurrencyCatalog) -> None:
        assert validate_currency("eur", catalog=catalog).value == "EUR"

    def test_lowercase_rejected_when_case_sensitive(self, catalog: StaticCurrencyCatalog) -> None:
        check = validate_currency("eur", catalog=catalog, case_insensitive=False)
        assert "must be uppercase" in _joined(check)

    def test_empty_is_required(self, catalog: StaticCurrencyCatalog) -> None:
        assert validate_currency("", catalog=catalog).failures == ("Currency is required",)

    def test_unknown_code_names_allowed_set(self, catalog: StaticCurrencyCatalog) -> None:
        check = validate_currency("GBP", catalog=catalog)
        assert check.failures == ("Invalid currency 'GBP'. Allowed values: EUR, INR, USD",)

    def test_full_iso_catalog(self) -> None:
        catalog = StaticCurrencyCatalog(ISO_4217_CODES)
        assert validate_currency("gbp", catalog=catalog).value == "GBP"
        check = validate_currency("ABC", catalog=catalog)
        assert "supported ISO 4217 codes" in _joined(check)

    def test_injected_catalog_is_used(self) -> None:
        assert validate_currency("xts", catalog=_SingleCodeCatalog()).value == "XTS"
        assert not validate_currency("USD", catalog=_SingleCodeCatalog()).ok
