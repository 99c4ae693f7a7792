"""
txn_validation/mappers package marker.
"""

from txn_validation.mappers.header_mapper import HeaderMapper, HeaderMapping

__all__ = [
    "HeaderMapper",
    "HeaderMapping",
]
