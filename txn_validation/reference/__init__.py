"""
txn_validation/reference package marker.
"""

from txn_validation.reference.currencies import (
    DEFAULT_CURRENCY_CODES,
    ISO_4217_CODES,
    CurrencyCatalog,
    StaticCurrencyCatalog,
)

__all__ = [
    "DEFAULT_CURRENCY_CODES",
    "ISO_4217_CODES",
    "CurrencyCatalog",
    "StaticCurrencyCatalog",
]
