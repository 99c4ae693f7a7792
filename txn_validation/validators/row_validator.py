"""
txn_validation/validators/row_validator.py

Row-level validation and type parsing for transaction files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from txn_validation.config import ValidationSettings
from txn_validation.domain.transaction import (
    FieldFailure,
    RowAccepted,
    RowOutcome,
    RowRejected,
    RowValidationError,
    Transaction,
)
from txn_validation.parsing.tokenizer import has_balanced_quotes
from txn_validation.reference.currencies import CurrencyCatalog, StaticCurrencyCatalog
from txn_validation.validators.duplicate_tracker import DuplicateTracker
from txn_validation.validators.field_validators import (
    FieldCheck,
    validate_amount,
    validate_currency,
    validate_date,
    validate_transaction_id,
)

if TYPE_CHECKING:
    from txn_validation.mappers.header_mapper import HeaderMapping


class TransactionRowValidator:
    """
    Validates one tokenized data row into a Transaction or a row error.

    Every field check runs even after an earlier one fails, so a single
    error reports all problems found in the row.
    """

    def __init__(
        self,
        settings: ValidationSettings,
        *,
        currency_catalog: CurrencyCatalog | None = None,
    ) -> None:
        self._settings = settings
        self._catalog = currency_catalog or StaticCurrencyCatalog(settings.currency_codes)
        date_header, id_header, amount_header, currency_header = settings.required_headers
        self._date_header = date_header
        self._id_header = id_header
        self._amount_header = amount_header
        self._currency_header = currency_header

    def validate_row(
        self,
        *,
        fields: Sequence[str],
        row_number: int,
        mapping: HeaderMapping,
        tracker: DuplicateTracker,
        raw_line: str | None = None,
    ) -> RowOutcome:
        """
        Validate and parse one data row.

        The identifier is registered with the tracker according to the
        configured duplicate policy: on acceptance only, or as soon as it is
        syntactically valid.
        """

        if (
            raw_line is not None
            and self._settings.reject_unbalanced_quotes
            and not has_balanced_quotes(raw_line, self._settings.quote_char)
        ):
            return self._reject(
                row_number,
                [FieldFailure(message="Malformed quoting: unterminated quoted field")],
            )

        expected_columns = len(self._settings.required_headers)
        if len(fields) < expected_columns:
            return self._reject(
                row_number,
                [
                    FieldFailure(
                        message=(
                            f"Insufficient number of columns. "
                            f"Expected {expected_columns}, found {len(fields)}"
                        )
                    )
                ],
            )

        values = mapping.values_from(fields)
        failures: list[FieldFailure] = []

        date_check = self._collect(
            validate_date(values[self._date_header], date_formats=self._settings.date_formats),
            column=self._date_header,
            raw=values[self._date_header],
            failures=failures,
        )
        id_check = self._collect(
            validate_transaction_id(
                values[self._id_header],
                exact_length=self._settings.transaction_id_exact_length,
                max_length=self._settings.transaction_id_max_length,
                pattern=self._settings.transaction_id_pattern,
            ),
            column=self._id_header,
            raw=values[self._id_header],
            failures=failures,
        )
        amount_check = self._collect(
            validate_amount(values[self._amount_header]),
            column=self._amount_header,
            raw=values[self._amount_header],
            failures=failures,
        )
        currency_check = self._collect(
            validate_currency(
                values[self._currency_header],
                catalog=self._catalog,
                case_insensitive=self._settings.currency_case_insensitive,
            ),
            column=self._currency_header,
            raw=values[self._currency_header],
            failures=failures,
        )

        transaction_id: str | None = id_check.value if id_check.ok else None
        if transaction_id is not None:
            if tracker.contains(transaction_id):
                failures.append(
                    FieldFailure(
                        message=f"Duplicate TransactionID '{transaction_id}'",
                        column=self._id_header,
                        value=transaction_id,
                    )
                )
            elif self._settings.duplicate_policy == "on_syntax":
                tracker.register(transaction_id)

        if failures:
            return self._reject(row_number, failures)

        transaction = Transaction(
            date=date_check.value,
            transaction_id=id_check.value,
            amount=amount_check.value,
            currency=currency_check.value,
        )
        if self._settings.duplicate_policy == "on_accept":
            tracker.register(transaction.transaction_id)
        return RowAccepted(transaction=transaction)

    @staticmethod
    def _collect(
        check: FieldCheck,
        *,
        column: str,
        raw: str,
        failures: list[FieldFailure],
    ) -> FieldCheck:
        for message in check.failures:
            failures.append(FieldFailure(message=message, column=column, value=raw or None))
        return check

    @staticmethod
    def _reject(row_number: int, failures: list[FieldFailure]) -> RowRejected:
        return RowRejected(error=RowValidationError.from_failures(row_number, failures))
