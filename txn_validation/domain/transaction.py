"""
txn_validation/domain/transaction.py

Domain models used by the transaction validation flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Transaction:
    """
    Fully validated transaction record.
    """

    date: date
    transaction_id: str
    amount: Decimal
    currency: str


@dataclass(frozen=True)
class FieldFailure:
    """
    One failed check within a row.
    """

    message: str
    column: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class RowValidationError:
    """
    All validation problems found for one data row.
    """

    row_number: int
    message: str
    failures: tuple[FieldFailure, ...] = ()

    @classmethod
    def from_failures(cls, row_number: int, failures: list[FieldFailure]) -> RowValidationError:
        return cls(
            row_number=row_number,
            message="; ".join(failure.message for failure in failures),
            failures=tuple(failures),
        )

    def __str__(self) -> str:
        return f"Row {self.row_number}: {self.message}"


@dataclass(frozen=True)
class RowAccepted:
    transaction: Transaction


@dataclass(frozen=True)
class RowRejected:
    error: RowValidationError


RowOutcome = Union[RowAccepted, RowRejected]


@dataclass(frozen=True)
class ValidationResult:
    """
    Terminal output of one validation run.
    """

    valid_transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    errors: tuple[RowValidationError, ...] = field(default_factory=tuple)

    @property
    def valid_rows(self) -> int:
        return len(self.valid_transactions)

    @property
    def invalid_rows(self) -> int:
        return len(self.errors)

    @property
    def total_rows(self) -> int:
        """Data rows processed, excluding skipped blank lines."""
        return self.valid_rows + self.invalid_rows

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_valid(self) -> bool:
        return bool(self.valid_transactions)
