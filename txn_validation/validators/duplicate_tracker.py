"""
txn_validation/validators/duplicate_tracker.py

Per-run record of transaction identifiers already seen.
"""

from __future__ import annotations


class DuplicateTracker:
    """
    Set of identifiers owned by a single validation run.

    Never share an instance across runs or files.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def __len__(self) -> int:
        return len(self._seen)

    def contains(self, transaction_id: str) -> bool:
        return transaction_id in self._seen

    def register(self, transaction_id: str) -> None:
        self._seen.add(transaction_id)
