"""
txn_validation/mappers/header_mapper.py

Resolves the header line into required-column positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from txn_validation.config import ValidationSettings
from txn_validation.validators.header_validator import HeaderValidator, normalize_header


@dataclass(frozen=True)
class HeaderMapping:
    """
    Final resolved header metadata.
    """

    column_indices: dict[str, int]
    source_headers: tuple[str, ...]

    def index_of(self, header: str) -> int | None:
        return self.column_indices.get(header)

    def values_from(self, fields: Sequence[str]) -> dict[str, str]:
        """
        Pick the required values out of one tokenized row.

        Columns past the end of the row read as empty strings.
        """

        return {
            header: fields[index] if index < len(fields) else ""
            for header, index in self.column_indices.items()
        }


class HeaderMapper:
    """
    Binds each required header name to the first column carrying it.

    Later duplicates of a required name are never read. Columns that are not
    required are ignored.
    """

    def __init__(
        self,
        settings: ValidationSettings,
        *,
        validator: HeaderValidator | None = None,
    ) -> None:
        self._required_headers = settings.required_headers
        self._validator = validator or HeaderValidator(
            required_headers=settings.required_headers,
            policy=settings.header_policy,
        )

    def resolve(self, header_fields: Sequence[str]) -> HeaderMapping:
        """
        Resolve required header names to column indices.

        Raises HeaderValidationError when the header line is blank, misses
        required names, or (strict policy) deviates from the required order.
        """

        source_headers = tuple(header_fields)
        first_index_by_name: dict[str, int] = {}
        for index, header in enumerate(source_headers):
            normalized = normalize_header(header)
            if normalized and normalized not in first_index_by_name:
                first_index_by_name[normalized] = index

        column_indices: dict[str, int] = {}
        for required in self._required_headers:
            index = first_index_by_name.get(normalize_header(required))
            if index is not None:
                column_indices[required] = index

        self._validator.validate(mapping=column_indices, source_headers=source_headers)
        return HeaderMapping(column_indices=column_indices, source_headers=source_headers)
