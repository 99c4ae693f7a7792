"""
txn_validation/services package marker.
"""

from txn_validation.services.validation_engine import (
    EmptyFileError,
    EngineState,
    FileReadError,
    InvalidFileError,
    InvalidHeadersError,
    NoDataRowsError,
    TransactionValidationEngine,
    UnsupportedFileTypeError,
    get_validation_engine,
)

__all__ = [
    "EmptyFileError",
    "EngineState",
    "FileReadError",
    "InvalidFileError",
    "InvalidHeadersError",
    "NoDataRowsError",
    "TransactionValidationEngine",
    "UnsupportedFileTypeError",
    "get_validation_engine",
]
