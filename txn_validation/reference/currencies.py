"""
txn_validation/reference/currencies.py

Currency allow-lists and the lookup capability injected into validators.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

DEFAULT_CURRENCY_CODES = frozenset({"USD", "EUR", "INR"})

# Active ISO 4217 alphabetic codes.
ISO_4217_CODES = frozenset(
    {
        "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
        "BAM", "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BOV",
        "BRL", "BSD", "BTN", "BWP", "BYN", "BZD", "CAD", "CDF", "CHE", "CHF",
        "CHW", "CLF", "CLP", "CNY", "COP", "COU", "CRC", "CUP", "CVE", "CZK",
        "DJF", "DKK", "DOP", "DZD", "EGP", "ERN", "ETB", "EUR", "FJD", "FKP",
        "GBP", "GEL", "GHS", "GIP", "GMD", "GNF", "GTQ", "GYD", "HKD", "HNL",
        "HTG", "HUF", "IDR", "ILS", "INR", "IQD", "IRR", "ISK", "JMD", "JOD",
        "JPY", "KES", "KGS", "KHR", "KMF", "KPW", "KRW", "KWD", "KYD", "KZT",
        "LAK", "LBP", "LKR", "LRD", "LSL", "LYD", "MAD", "MDL", "MGA", "MKD",
        "MMK", "MNT", "MOP", "MRU", "MUR", "MVR", "MWK", "MXN", "MXV", "MYR",
        "MZN", "NAD", "NGN", "NIO", "NOK", "NPR", "NZD", "OMR", "PAB", "PEN",
        "PGK", "PHP", "PKR", "PLN", "PYG", "QAR", "RON", "RSD", "RUB", "RWF",
        "SAR", "SBD", "SCR", "SDG", "SEK", "SGD", "SHP", "SLE", "SOS", "SRD",
        "SSP", "STN", "SVC", "SYP", "SZL", "THB", "TJS", "TMT", "TND", "TOP",
        "TRY", "TTD", "TWD", "TZS", "UAH", "UGX", "USD", "USN", "UYI", "UYU",
        "UYW", "UZS", "VED", "VES", "VND", "VUV", "WST", "XAF", "XCD", "XOF",
        "XPF", "YER", "ZAR", "ZMW", "ZWG",
    }
)

# Catalogs larger than this are described by size instead of listed in messages.
_MAX_LISTED_CODES = 10


@runtime_checkable
class CurrencyCatalog(Protocol):
    """
    Read-only set-membership lookup for supported currency codes.
    """

    def is_supported(self, code: str) -> bool:
        ...

    def describe(self) -> str:
        ...


class StaticCurrencyCatalog:
    """
    Currency catalog backed by a fixed set of upper-case codes.
    """

    def __init__(self, codes: Iterable[str]) -> None:
        self._codes = frozenset(code.strip().upper() for code in codes if code and code.strip())
        if not self._codes:
            raise ValueError("Currency catalog requires at least one code.")

    @property
    def codes(self) -> frozenset[str]:
        return self._codes

    def is_supported(self, code: str) -> bool:
        return code in self._codes

    def describe(self) -> str:
        if len(self._codes) <= _MAX_LISTED_CODES:
            return ", ".join(sorted(self._codes))
        return f"one of {len(self._codes)} supported ISO 4217 codes"
