"""
txn_validation/validators package marker.
"""

from txn_validation.validators.duplicate_tracker import DuplicateTracker
from txn_validation.validators.field_validators import (
    FieldCheck,
    validate_amount,
    validate_currency,
    validate_date,
    validate_transaction_id,
)
from txn_validation.validators.header_validator import HeaderErrorDetail, HeaderValidationError, HeaderValidator
from txn_validation.validators.row_validator import TransactionRowValidator

__all__ = [
    "DuplicateTracker",
    "FieldCheck",
    "HeaderErrorDetail",
    "HeaderValidationError",
    "HeaderValidator",
    "TransactionRowValidator",
    "validate_amount",
    "validate_currency",
    "validate_date",
    "validate_transaction_id",
]
