"""
txn_validation/services/validation_engine.py

Top-level orchestration for validating one transaction file.

A run reads the input line by line:

    1. File basics (content present, extension, declared content type)
    2. Header line, resolved once into required-column positions
    3. Each following non-blank line, tokenized and validated into either a
       Transaction or a row-level error

File-level problems raise an InvalidFileError subclass and produce no
result. Row-level problems are collected and returned alongside the valid
transactions. All mutable state lives in a per-call run object, so one engine
instance can serve concurrent callers.
"""

from __future__ import annotations

import io
import logging
from enum import Enum
from functools import lru_cache
from typing import BinaryIO, Iterator, Union

from txn_validation.config import ValidationSettings, get_validation_settings
from txn_validation.domain.transaction import (
    RowAccepted,
    RowValidationError,
    Transaction,
    ValidationResult,
)
from txn_validation.logging_utils import log_event
from txn_validation.mappers.header_mapper import HeaderMapper, HeaderMapping
from txn_validation.parsing.tokenizer import is_blank_line, tokenize_line
from txn_validation.reference.currencies import CurrencyCatalog, StaticCurrencyCatalog
from txn_validation.validators.duplicate_tracker import DuplicateTracker
from txn_validation.validators.header_validator import HeaderErrorDetail, HeaderValidationError
from txn_validation.validators.row_validator import TransactionRowValidator

logger = logging.getLogger(__name__)

FileContent = Union[bytes, bytearray, BinaryIO]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InvalidFileError(ValueError):
    """
    Raised when the whole file is rejected.
    """


class EmptyFileError(InvalidFileError):
    """
    Raised when no content or no header line was supplied.
    """


class UnsupportedFileTypeError(InvalidFileError):
    """
    Raised when the file name does not carry an allowed extension.
    """


class FileReadError(InvalidFileError):
    """
    Raised when the input cannot be read or decoded.
    """


class NoDataRowsError(InvalidFileError):
    """
    Raised when the header is followed only by blank lines or end of input.
    """


class InvalidHeadersError(InvalidFileError):
    """
    Raised when header resolution fails, with structured details.
    """

    def __init__(self, *, message: str, errors: list[HeaderErrorDetail]) -> None:
        super().__init__(message)
        self.errors = tuple(errors)

    def to_dict(self) -> dict[str, object]:
        return {
            "message": str(self),
            "errors": [
                {
                    "code": error.code,
                    "message": error.message,
                    "header": error.header,
                    "context": error.context,
                }
                for error in self.errors
            ],
        }


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------


class EngineState(str, Enum):
    AWAITING_HEADER = "awaiting_header"
    PROCESSING_ROWS = "processing_rows"
    DONE = "done"
    FAILED = "failed"


class _ValidationRun:
    """
    Mutable state owned by exactly one call to validate().
    """

    def __init__(self, filename: str | None) -> None:
        self.filename = filename
        self.state = EngineState.AWAITING_HEADER
        self.tracker = DuplicateTracker()
        self.valid_transactions: list[Transaction] = []
        self.errors: list[RowValidationError] = []
        self.skipped_blank_lines = 0

    def transition(self, state: EngineState) -> None:
        logger.debug(
            "Validation state change filename=%r %s -> %s",
            self.filename,
            self.state.value,
            state.value,
        )
        self.state = state

    def to_result(self) -> ValidationResult:
        return ValidationResult(
            valid_transactions=tuple(self.valid_transactions),
            errors=tuple(self.errors),
        )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class TransactionValidationEngine:
    """
    Validates transaction files into typed records and row-attributed errors.
    """

    def __init__(
        self,
        settings: ValidationSettings | None = None,
        *,
        currency_catalog: CurrencyCatalog | None = None,
        header_mapper: HeaderMapper | None = None,
        row_validator: TransactionRowValidator | None = None,
    ) -> None:
        self._settings = settings or ValidationSettings()
        catalog = currency_catalog or StaticCurrencyCatalog(self._settings.currency_codes)
        self._header_mapper = header_mapper or HeaderMapper(self._settings)
        self._row_validator = row_validator or TransactionRowValidator(
            self._settings,
            currency_catalog=catalog,
        )

    @property
    def settings(self) -> ValidationSettings:
        return self._settings

    def validate(
        self,
        content: FileContent | None,
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> ValidationResult:
        """
        Validate one file and return its valid transactions and row errors.

        Args:
            content:       Raw bytes or a readable binary stream. A stream is
                           read but never closed; the caller owns it.
            filename:      Original upload name. The extension check is skipped
                           when it is not known.
            content_type:  Declared MIME type. Unexpected values only warn.

        Raises:
            InvalidFileError: one of its subclasses when the file is rejected
            outright.
        """

        run = _ValidationRun(filename)
        try:
            result = self._run(run, content, content_type)
        except InvalidFileError as exc:
            run.transition(EngineState.FAILED)
            logger.warning("Transaction file rejected filename=%r reason=%s", filename, exc)
            raise

        log_event(
            logger,
            logging.INFO,
            "transaction_validation_completed",
            filename=filename,
            total_rows=result.total_rows,
            valid_rows=result.valid_rows,
            invalid_rows=result.invalid_rows,
            skipped_blank_lines=run.skipped_blank_lines,
        )
        return result

    def _run(
        self,
        run: _ValidationRun,
        content: FileContent | None,
        content_type: str | None,
    ) -> ValidationResult:
        if content is None or (isinstance(content, (bytes, bytearray)) and not content):
            raise EmptyFileError("File is empty or not provided")
        self._validate_file_metadata(filename=run.filename, content_type=content_type)

        raw_stream: BinaryIO = (
            io.BytesIO(bytes(content)) if isinstance(content, (bytes, bytearray)) else content
        )
        text_stream = self._open_text_stream(raw_stream)
        try:
            lines = self._read_lines(text_stream)
            mapping = self._resolve_header(next(lines, None))

            run.transition(EngineState.PROCESSING_ROWS)
            for row_number, line in enumerate(lines, start=2):
                if is_blank_line(line):
                    run.skipped_blank_lines += 1
                    continue
                self._process_row(run, line=line, row_number=row_number, mapping=mapping)
        finally:
            try:
                text_stream.detach()
            except ValueError:
                pass

        if not run.valid_transactions and not run.errors:
            raise NoDataRowsError("CSV file contains no data rows")

        run.transition(EngineState.DONE)
        return run.to_result()

    def _validate_file_metadata(
        self,
        *,
        filename: str | None,
        content_type: str | None,
    ) -> None:
        if filename is not None:
            normalized_name = filename.strip().lower()
            if not any(normalized_name.endswith(ext.lower()) for ext in self._settings.allowed_extensions):
                allowed = ", ".join(self._settings.allowed_extensions)
                raise UnsupportedFileTypeError(f"File must be a CSV file with {allowed} extension")

        if content_type is not None:
            normalized_type = content_type.split(";", 1)[0].strip().lower()
            if normalized_type not in self._settings.expected_content_types:
                logger.warning(
                    "Unexpected content type for CSV upload filename=%r content_type=%r",
                    filename,
                    content_type,
                )

    @staticmethod
    def _open_text_stream(raw_stream: BinaryIO) -> io.TextIOWrapper:
        try:
            return io.TextIOWrapper(raw_stream, encoding="utf-8-sig", newline="")
        except (OSError, ValueError) as exc:
            raise FileReadError(f"Error reading CSV file: {exc}") from exc

    @staticmethod
    def _read_lines(text_stream: io.TextIOWrapper) -> Iterator[str]:
        while True:
            try:
                line = text_stream.readline()
            except UnicodeDecodeError as exc:
                raise FileReadError("CSV must be UTF-8 encoded.") from exc
            except (OSError, ValueError) as exc:
                raise FileReadError(f"Error reading CSV file: {exc}") from exc
            if not line:
                return
            yield line.rstrip("\r\n")

    def _resolve_header(self, header_line: str | None) -> HeaderMapping:
        if header_line is None or is_blank_line(header_line):
            raise EmptyFileError("CSV file is empty or missing headers")

        header_fields = tokenize_line(
            header_line,
            delimiter=self._settings.delimiter,
            quote_char=self._settings.quote_char,
        )
        try:
            return self._header_mapper.resolve(header_fields)
        except HeaderValidationError as exc:
            raise InvalidHeadersError(message=exc.message, errors=list(exc.errors)) from exc

    def _process_row(
        self,
        run: _ValidationRun,
        *,
        line: str,
        row_number: int,
        mapping: HeaderMapping,
    ) -> None:
        fields = tokenize_line(
            line,
            delimiter=self._settings.delimiter,
            quote_char=self._settings.quote_char,
        )
        outcome = self._row_validator.validate_row(
            fields=fields,
            row_number=row_number,
            mapping=mapping,
            tracker=run.tracker,
            raw_line=line,
        )
        if isinstance(outcome, RowAccepted):
            run.valid_transactions.append(outcome.transaction)
            return

        run.errors.append(outcome.error)
        if self._settings.log_validation_errors:
            logger.warning(
                "CSV validation error filename=%r row=%s message=%s",
                run.filename,
                outcome.error.row_number,
                outcome.error.message,
            )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_validation_engine() -> TransactionValidationEngine:
    """
    Build and cache the engine with env-driven settings.
    """

    return TransactionValidationEngine(get_validation_settings())
