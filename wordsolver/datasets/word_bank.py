"""
Immutable, validated bank of equal-length words.

Rules (applied on construction):
  - each word is trimmed and lower-cased
  - at least one word must be provided
  - all words must have the same length (in letters, not bytes)

The bank is built once per process and handed to guessers, which draw a fresh
PossibleWords view from it for every game.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Tuple

from wordsolver.engine.constraints import PossibleWords
from wordsolver.engine.validation import normalize_word
from wordsolver.errors import EmptyWordBankError, InconsistentWordLengthsError
from .io import read_word_file


class WordBank:
    """A read-only, ordered set of equal-length words."""

    def __init__(self, words: Iterable[str]):
        normalized = tuple(normalize_word(w) for w in words)
        if not normalized:
            raise EmptyWordBankError("At least one word must be provided.")

        word_length = len(normalized[0])
        for w in normalized:
            if len(w) != word_length:
                raise InconsistentWordLengthsError(
                    f"Words must all be the same length. Encountered word with length "
                    f"{len(w)} when expecting length {word_length}."
                )

        self._words: Tuple[str, ...] = normalized
        self._word_length = word_length
        self._word_set = frozenset(normalized)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WordBank":
        """One word per line; blank (or whitespace-only) lines are skipped."""
        return cls(ln for ln in lines if ln.strip())

    @classmethod
    def from_path(cls, path: Path | str) -> "WordBank":
        return cls(read_word_file(path))

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def all_words(self) -> PossibleWords:
        """A fresh, unrestricted candidate set over every word in the bank."""
        return PossibleWords(self._words, self._word_length)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._word_set

    def __repr__(self) -> str:
        return f"WordBank(n={len(self._words)}, word_length={self._word_length})"
