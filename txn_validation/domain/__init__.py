"""
txn_validation/domain package marker.
"""

from txn_validation.domain.transaction import (
    FieldFailure,
    RowAccepted,
    RowOutcome,
    RowRejected,
    RowValidationError,
    Transaction,
    ValidationResult,
)

__all__ = [
    "FieldFailure",
    "RowAccepted",
    "RowOutcome",
    "RowRejected",
    "RowValidationError",
    "Transaction",
    "ValidationResult",
]
