"""
txn_validation/schemas package marker.
"""

from txn_validation.schemas.validation import (
    FieldFailureResponse,
    RowValidationErrorResponse,
    TransactionResponse,
    ValidationResultResponse,
)

__all__ = [
    "FieldFailureResponse",
    "RowValidationErrorResponse",
    "TransactionResponse",
    "ValidationResultResponse",
]
