"""
txn_validation/validators/field_validators.py

Stateless validators for the four transaction fields.

Each validator accepts the raw (already trimmed) field text and returns a
FieldCheck carrying either the typed value or the failure messages. None of
them raise for bad input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Sequence

from txn_validation.reference.currencies import CurrencyCatalog

MAX_AMOUNT_SCALE = 2

_UNSIGNED_AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

_FORMAT_LABELS = (("%Y", "YYYY"), ("%m", "MM"), ("%d", "DD"))


@dataclass(frozen=True)
class FieldCheck:
    """
    Outcome of one field validation.
    """

    value: Any = None
    failures: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    @classmethod
    def success(cls, value: Any) -> FieldCheck:
        return cls(value=value)

    @classmethod
    def failure(cls, *messages: str) -> FieldCheck:
        return cls(failures=tuple(messages))


def describe_date_format(fmt: str) -> str:
    """
    Render a strptime format the way users write it, e.g. YYYY-MM-DD.
    """

    label = fmt
    for directive, text in _FORMAT_LABELS:
        label = label.replace(directive, text)
    return label


def validate_date(raw: str, *, date_formats: Sequence[str]) -> FieldCheck:
    if not raw:
        return FieldCheck.failure("Date is required")

    for fmt in date_formats:
        try:
            parsed = datetime.strptime(raw, fmt)
        except ValueError:
            continue
        # strptime accepts unpadded months and days; only exact renderings count.
        if parsed.strftime(fmt) == raw:
            return FieldCheck.success(parsed.date())

    expected = " or ".join(describe_date_format(fmt) for fmt in date_formats)
    return FieldCheck.failure(f"Invalid date format '{raw}'. Expected format: {expected}")


def validate_transaction_id(
    raw: str,
    *,
    exact_length: int | None = None,
    max_length: int | None = None,
    pattern: str | None = None,
) -> FieldCheck:
    if not raw:
        return FieldCheck.failure("TransactionID is required")

    failures: list[str] = []
    length = len(raw)
    if exact_length is not None and length != exact_length:
        failures.append(
            f"TransactionID must be exactly {exact_length} characters. "
            f"Found: '{raw}' ({length} characters)"
        )
    if max_length is not None and length > max_length:
        failures.append(
            f"TransactionID must be at most {max_length} characters. Found: {length} characters"
        )
    if pattern is not None and re.fullmatch(pattern, raw) is None:
        failures.append(
            "TransactionID may only contain letters, digits, underscores and hyphens. "
            f"Found: '{raw}'"
        )

    if failures:
        return FieldCheck.failure(*failures)
    return FieldCheck.success(raw)


def decimal_scale(value: Decimal) -> int:
    """
    Number of digits after the decimal point as written.
    """

    exponent = value.as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def validate_amount(raw: str) -> FieldCheck:
    if not raw:
        return FieldCheck.failure("Amount is required")

    failures: list[str] = []
    negative = raw.startswith("-")
    body = raw[1:] if negative else raw
    if negative:
        failures.append(f"Amount must be positive. Found: {raw}")

    if _UNSIGNED_AMOUNT_PATTERN.fullmatch(body) is None:
        failures.append(f"Invalid amount '{raw}'. Amount must be a number")
        return FieldCheck.failure(*failures)

    amount = Decimal(body)

    if not negative and amount <= 0:
        failures.append(f"Amount must be positive. Found: {raw}")
    if decimal_scale(amount) > MAX_AMOUNT_SCALE:
        failures.append(
            f"Amount '{raw}' has too many decimal places. At most {MAX_AMOUNT_SCALE} allowed"
        )

    if failures:
        return FieldCheck.failure(*failures)
    return FieldCheck.success(amount)


def validate_currency(
    raw: str,
    *,
    catalog: CurrencyCatalog,
    case_insensitive: bool = True,
) -> FieldCheck:
    if not raw:
        return FieldCheck.failure("Currency is required")

    if case_insensitive:
        code = raw.upper()
    elif raw != raw.upper():
        return FieldCheck.failure(f"Currency code '{raw}' must be uppercase")
    else:
        code = raw

    if not catalog.is_supported(code):
        return FieldCheck.failure(
            f"Invalid currency '{raw}'. Allowed values: {catalog.describe()}"
        )
    return FieldCheck.success(code)

