"""
txn_validation/parsing/tokenizer.py

Single-line tokenizer for delimited transaction files.

Quotes use plain toggle semantics: there are no escaped quotes, and a quote
anywhere in a field flips the "inside quotes" mode. An unterminated quote
keeps the rest of the line inside one quoted span; callers that want to
reject such lines check `has_balanced_quotes` first.
"""

from __future__ import annotations


def tokenize_line(line: str, delimiter: str = ",", quote_char: str = '"') -> list[str]:
    """
    Split one line into trimmed field strings.

    A line ending in the delimiter yields a trailing empty field.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line.rstrip("\r\n"):
        if char == quote_char:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def has_balanced_quotes(line: str, quote_char: str = '"') -> bool:
    return line.count(quote_char) % 2 == 0


def is_blank_line(line: str) -> bool:
    return not line.strip()
