"""
Candidate filtering given game feedback.

PossibleWords is the live candidate set for one game:
  - an ordered list of words drawn from a WordBank (bank order, never sorted)
  - the WordRestrictions accumulated from every result seen so far

Filtering folds a new result into the restrictions and drops every word that
no longer satisfies them, so the set only ever shrinks within a game.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from wordsolver.errors import NoGuessAvailableError
from .restrictions import WordRestrictions
from .scoring import GuessResult

logger = logging.getLogger(__name__)


def filter_candidates(words: Iterable[str], restrictions: WordRestrictions) -> List[str]:
    """
    Keep only the words that satisfy `restrictions`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    return [w for w in words if restrictions.is_satisfied_by(w)]


class PossibleWords:
    """The words that could still be the objective."""

    def __init__(self, words: Iterable[str], word_length: int,
                 restrictions: Optional[WordRestrictions] = None):
        self._words: List[str] = list(words)
        self._restrictions = restrictions if restrictions is not None else WordRestrictions(word_length)

    def copy(self) -> "PossibleWords":
        return PossibleWords(self._words, self._restrictions.word_length, self._restrictions.copy())

    @property
    def word_length(self) -> int:
        return self._restrictions.word_length

    @property
    def restrictions(self) -> WordRestrictions:
        return self._restrictions

    @property
    def words(self) -> List[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def filter(self, result: GuessResult) -> None:
        """
        Fold `result` into the restrictions and drop every word that no
        longer satisfies them.

        Raises ConflictingRestrictionError if the result contradicts earlier
        ones. A failed filter leaves the set unusable for the current game.
        """
        self._restrictions.update(result)
        before = len(self._words)
        self._words = filter_candidates(self._words, self._restrictions)
        logger.debug("Filtered by %s %s: %d -> %d candidates",
                     result.guess, result.pattern, before, len(self._words))

    def remove(self, word: str) -> bool:
        """
        Delete `word` if present, without touching the restrictions.

        Returns True if the word was present and has been removed.
        """
        try:
            self._words.remove(word)
        except ValueError:
            return False
        return True

    def maximizing(self, fn: Callable[[str], int]) -> str:
        """
        The word with the highest fn(word); the earliest one wins ties.

        Raises NoGuessAvailableError if there are no words.
        """
        if not self._words:
            raise NoGuessAvailableError("No more valid guesses.")
        best_word = self._words[0]
        best_score = fn(best_word)
        for word in self._words[1:]:
            score = fn(word)
            if score > best_score:
                best_score, best_word = score, word
        return best_word

    def __repr__(self) -> str:
        preview = ", ".join(self._words[:5])
        more = "" if len(self._words) <= 5 else ", ..."
        return f"PossibleWords([{preview}{more}], n={len(self._words)})"
