"""
txn_validation/config.py

Validation policy settings and environment helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path

from txn_validation.reference.currencies import DEFAULT_CURRENCY_CODES, ISO_4217_CODES

HEADER_POLICIES = {"name", "strict"}
DUPLICATE_POLICIES = {"on_accept", "on_syntax"}
PROFILES = {"default", "lenient"}

REQUIRED_HEADERS: tuple[str, ...] = ("Date", "TransactionID", "Amount", "Currency")

ISO_DATE_FORMAT = "%Y-%m-%d"
LENIENT_DATE_FORMATS: tuple[str, ...] = (ISO_DATE_FORMAT, "%d/%m/%Y", "%m/%d/%Y")

LENIENT_TRANSACTION_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

CSV_CONTENT_TYPES = frozenset(
    {
        "text/csv",
        "application/csv",
        "application/vnd.ms-excel",
        "application/octet-stream",
    }
)


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_choice_env(name: str, default: str, allowed: set[str]) -> str:
    """
    Read a lowercase choice from environment variables.

    Unknown values raise so a typo never silently selects another policy.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    value = raw_value.strip().lower()
    if value not in allowed:
        raise RuntimeError(
            f"{name} '{raw_value.strip()}' is not valid. Allowed values: {sorted(allowed)}."
        )
    return value


@dataclass(frozen=True)
class ValidationSettings:
    """
    Policy knobs for one validation engine.

    The defaults reproduce the strict production variant: ISO dates only,
    10-character identifiers, and the USD/EUR/INR allow-list.
    """

    delimiter: str = ","
    quote_char: str = '"'
    required_headers: tuple[str, ...] = REQUIRED_HEADERS
    header_policy: str = "name"
    date_formats: tuple[str, ...] = (ISO_DATE_FORMAT,)
    transaction_id_exact_length: int | None = 10
    transaction_id_max_length: int | None = None
    transaction_id_pattern: str | None = None
    currency_codes: frozenset[str] = DEFAULT_CURRENCY_CODES
    currency_case_insensitive: bool = True
    duplicate_policy: str = "on_accept"
    reject_unbalanced_quotes: bool = True
    allowed_extensions: tuple[str, ...] = (".csv",)
    expected_content_types: frozenset[str] = CSV_CONTENT_TYPES
    log_validation_errors: bool = True

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character.")
        if len(self.quote_char) != 1 or self.quote_char == self.delimiter:
            raise ValueError("quote_char must be a single character distinct from the delimiter.")
        if len(self.required_headers) != len(REQUIRED_HEADERS):
            raise ValueError(
                "required_headers must name the date, identifier, amount and currency columns in that order."
            )
        if self.header_policy not in HEADER_POLICIES:
            raise ValueError(f"header_policy must be one of {sorted(HEADER_POLICIES)}.")
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(f"duplicate_policy must be one of {sorted(DUPLICATE_POLICIES)}.")
        if ISO_DATE_FORMAT not in self.date_formats:
            raise ValueError("date_formats must include the ISO format %Y-%m-%d.")
        if self.transaction_id_exact_length is None and self.transaction_id_max_length is None:
            raise ValueError("Either transaction_id_exact_length or transaction_id_max_length is required.")
        if not self.currency_codes:
            raise ValueError("currency_codes must not be empty.")


def default_settings() -> ValidationSettings:
    """
    Return the strict profile settings.
    """

    return ValidationSettings()


def lenient_settings() -> ValidationSettings:
    """
    Return the lenient profile: multi-format dates, up to 100-character
    identifiers restricted to letters, digits, underscore and hyphen, and the
    full ISO 4217 currency list.
    """

    return ValidationSettings(
        date_formats=LENIENT_DATE_FORMATS,
        transaction_id_exact_length=None,
        transaction_id_max_length=100,
        transaction_id_pattern=LENIENT_TRANSACTION_ID_PATTERN,
        currency_codes=ISO_4217_CODES,
    )


def settings_for_profile(profile: str) -> ValidationSettings:
    normalized = profile.strip().lower()
    if normalized == "lenient":
        return lenient_settings()
    if normalized == "default":
        return default_settings()
    raise ValueError(f"Unknown validation profile '{profile}'. Allowed values: {sorted(PROFILES)}.")


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """
    Return cached validation settings from environment variables.
    """

    base = settings_for_profile(_get_choice_env("TXN_VALIDATION_PROFILE", "default", PROFILES))
    return replace(
        base,
        header_policy=_get_choice_env(
            "TXN_VALIDATION_HEADER_POLICY", base.header_policy, HEADER_POLICIES
        ),
        duplicate_policy=_get_choice_env(
            "TXN_VALIDATION_DUPLICATE_POLICY", base.duplicate_policy, DUPLICATE_POLICIES
        ),
        log_validation_errors=_get_bool_env(
            "TXN_VALIDATION_LOG_ERRORS", base.log_validation_errors
        ),
    )
