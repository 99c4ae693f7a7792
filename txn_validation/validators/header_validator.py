"""
txn_validation/validators/header_validator.py

Validation for header line resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence


def normalize_header(header: str) -> str:
    """
    Normalize a column name for case-insensitive matching.
    """

    return header.strip().casefold()


@dataclass(frozen=True)
class HeaderErrorDetail:
    """
    Structured header error detail.
    """

    code: str
    message: str
    header: str | None = None
    context: dict[str, Any] | None = None


class HeaderValidationError(ValueError):
    """
    Raised when the header line cannot be resolved into required columns.
    """

    def __init__(self, *, message: str, errors: Sequence[HeaderErrorDetail]) -> None:
        super().__init__(message)
        self.message = message
        self.errors = tuple(errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
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


class HeaderValidator:
    """
    Validates resolved header-to-index mappings.
    """

    def __init__(
        self,
        *,
        required_headers: Sequence[str],
        policy: str = "name",
    ) -> None:
        self._required_headers = tuple(required_headers)
        self._policy = policy

    @property
    def expected_display(self) -> str:
        return ", ".join(self._required_headers)

    def validate(
        self,
        *,
        mapping: Mapping[str, int],
        source_headers: Sequence[str],
    ) -> None:
        """
        Validate mapping and raise structured errors if invalid.
        """

        if not any(header.strip() for header in source_headers):
            raise HeaderValidationError(
                message="CSV file is empty or missing headers.",
                errors=[
                    HeaderErrorDetail(
                        code="empty_headers",
                        message="No CSV headers were provided.",
                    )
                ],
            )

        if self._policy == "strict":
            self._validate_exact_order(source_headers)

        missing = [header for header in self._required_headers if header not in mapping]
        if missing:
            raise HeaderValidationError(
                message=(
                    f"Missing required headers: {', '.join(missing)}. "
                    f"Expected headers: {self.expected_display}"
                ),
                errors=[
                    HeaderErrorDetail(
                        code="required_header_missing",
                        message="Required header is not present.",
                        header=header,
                        context={"source_headers": list(source_headers)},
                    )
                    for header in missing
                ],
            )

    def _validate_exact_order(self, source_headers: Sequence[str]) -> None:
        normalized_source = [normalize_header(header) for header in source_headers]
        normalized_required = [normalize_header(header) for header in self._required_headers]
        if normalized_source == normalized_required:
            return

        raise HeaderValidationError(
            message=f"Invalid headers. Expected: {self.expected_display}",
            errors=[
                HeaderErrorDetail(
                    code="header_order_mismatch",
                    message="Header names, count, or order do not match the required list.",
                    context={
                        "source_headers": list(source_headers),
                        "expected_headers": list(self._required_headers),
                    },
                )
            ],
        )
