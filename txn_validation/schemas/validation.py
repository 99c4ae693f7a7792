"""
txn_validation/schemas/validation.py

Response schemas for serializing validation outcomes.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from txn_validation.domain.transaction import RowValidationError, Transaction, ValidationResult


class TransactionResponse(BaseModel):
    """
    One validated transaction. Amounts are strings to keep exact decimals.
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date
    transaction_id: str
    amount: str
    currency: str = Field(..., min_length=3, max_length=3)

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> TransactionResponse:
        return cls(
            date=transaction.date,
            transaction_id=transaction.transaction_id,
            amount=str(transaction.amount),
            currency=transaction.currency,
        )


class FieldFailureResponse(BaseModel):
    message: str
    column: str | None = None
    value: str | None = None


class RowValidationErrorResponse(BaseModel):
    """
    API response model for one row-level validation error.
    """

    row_number: int = Field(..., ge=2)
    message: str
    failures: list[FieldFailureResponse] = Field(default_factory=list)

    @classmethod
    def from_error(cls, error: RowValidationError) -> RowValidationErrorResponse:
        return cls(
            row_number=error.row_number,
            message=error.message,
            failures=[
                FieldFailureResponse(
                    message=failure.message,
                    column=failure.column,
                    value=failure.value,
                )
                for failure in error.failures
            ],
        )


class ValidationResultResponse(BaseModel):
    """
    Response model for a completed validation run.
    """

    total_rows: int = Field(..., ge=0)
    valid_rows: int = Field(..., ge=0)
    invalid_rows: int = Field(..., ge=0)
    valid_transactions: list[TransactionResponse] = Field(default_factory=list)
    errors: list[RowValidationErrorResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValidationResult) -> ValidationResultResponse:
        return cls(
            total_rows=result.total_rows,
            valid_rows=result.valid_rows,
            invalid_rows=result.invalid_rows,
            valid_transactions=[
                TransactionResponse.from_transaction(transaction)
                for transaction in result.valid_transactions
            ],
            errors=[RowValidationErrorResponse.from_error(error) for error in result.errors],
        )
