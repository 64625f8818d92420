"""
Lightweight objective/guess validation.

This module answers the question: "Can this word be played against this bank?"
A word is valid iff:
  - it is a string
  - after trimming and lower-casing, it has the bank's word length
  - it exists in the bank
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordsolver.datasets.word_bank import WordBank


def normalize_word(word: str) -> str:
    """Canonical form used by word banks: trimmed, lower case."""
    return word.strip().lower()


def validate_guess(word: str, bank: "WordBank") -> bool:
    """Return True if `word` is a valid guess (or objective) for `bank`."""
    if not isinstance(word, str):
        return False

    w = normalize_word(word)
    if len(w) != bank.word_length:
        return False
    return w in bank
