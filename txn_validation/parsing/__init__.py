"""
txn_validation/parsing package marker.
"""

from txn_validation.parsing.tokenizer import has_balanced_quotes, is_blank_line, tokenize_line

__all__ = [
    "has_balanced_quotes",
    "is_blank_line",
    "tokenize_line",
]
