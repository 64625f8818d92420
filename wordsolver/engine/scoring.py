"""
Wordle-style feedback for a single (objective, guess) pair.

Conventions (pattern symbols):
  - 'G'  : Correct        = letter in the correct position
  - 'Y'  : PresentNotHere = letter in the objective, but not here
  - '-'  : NotPresent     = letter not in the objective (or present fewer
                            times than it was guessed)
  - '?'  : Unknown        = no information (never produced by scoring)

This implementation is:
  - length-aware (any word length, Unicode letters)
  - duplicate-safe (respects true letter multiplicities in the objective)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks every exact positional match Correct.
  2) Each letter then has a budget of (count in objective - Correct matches).
     Scanning the remaining guess positions left to right, a letter with
     budget left is marked PresentNotHere and consumes one unit; otherwise
     it is NotPresent.

Example: objective "mesas", guess "sassy" -> "YYG--".
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from wordsolver.errors import LengthMismatchError, WordleError

# Compressed results pack 2 bits per letter.
MAX_LETTERS_IN_COMPRESSED_RESULT = 10


class LetterResult(Enum):
    """Per-position outcome of comparing a guess to an objective."""
    UNKNOWN = "?"
    CORRECT = "G"
    PRESENT_NOT_HERE = "Y"
    NOT_PRESENT = "-"

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


# Small integer codes used for compression; index order matches _CODE_TO_RESULT.
_CODE_TO_RESULT = (
    LetterResult.UNKNOWN,
    LetterResult.CORRECT,
    LetterResult.PRESENT_NOT_HERE,
    LetterResult.NOT_PRESENT,
)
_RESULT_TO_CODE = {r: i for i, r in enumerate(_CODE_TO_RESULT)}
_CORRECT = 1
_PRESENT_NOT_HERE = 2
_NOT_PRESENT = 3


@dataclass(frozen=True)
class GuessResult:
    """The feedback for one guess: one LetterResult per letter of the guess."""
    guess: str
    results: Tuple[LetterResult, ...]

    def __post_init__(self):
        if len(self.results) != len(self.guess):
            raise LengthMismatchError(
                f"A guess result needs one letter result per letter "
                f"(guess: {self.guess}, results: {len(self.results)})."
            )

    @classmethod
    def from_pattern(cls, guess: str, pattern: str) -> "GuessResult":
        """
        Build a result from a pattern string such as "YYG--".

        Useful for tests and for entering feedback from a real game.
        """
        return cls(guess, tuple(LetterResult(ch) for ch in pattern))

    @property
    def pattern(self) -> str:
        return "".join(r.value for r in self.results)

    def is_correct(self) -> bool:
        return all(r is LetterResult.CORRECT for r in self.results)

    def __iter__(self):
        return iter(zip(self.guess, self.results))


def _result_codes(objective: str, guess: str) -> List[int]:
    if len(guess) != len(objective):
        raise LengthMismatchError(
            f"The guess ({guess}) must be the same length as the objective "
            f"(length: {len(objective)})."
        )

    n = len(guess)
    codes = [_NOT_PRESENT] * n

    # Pass 1: mark Correct and count the objective letters left unmatched.
    remaining = Counter()
    for i, (g, o) in enumerate(zip(guess, objective)):
        if g == o:
            codes[i] = _CORRECT
        else:
            remaining[o] += 1

    # Pass 2: earliest unmatched guess occurrences get PresentNotHere.
    for i, g in enumerate(guess):
        if codes[i] == _CORRECT:
            continue
        if remaining[g] > 0:
            codes[i] = _PRESENT_NOT_HERE
            remaining[g] -= 1

    return codes


def get_result_for_guess(objective: str, guess: str) -> GuessResult:
    """
    Compute the feedback for `guess` against the hidden `objective`.

    Raises:
      LengthMismatchError if the two words differ in length.

    Examples:
      get_result_for_guess("mesas", "sassy").pattern -> "YYG--"
      get_result_for_guess("abba", "babb").pattern   -> "YYG-"
    """
    codes = _result_codes(objective, guess)
    return GuessResult(guess, tuple(_CODE_TO_RESULT[c] for c in codes))


def compress_results(results: Sequence[LetterResult]) -> int:
    """
    Pack a result sequence into a single int, 2 bits per letter.

    Distinct sequences of the same length always map to distinct ints.
    """
    if len(results) > MAX_LETTERS_IN_COMPRESSED_RESULT:
        raise WordleError(
            f"Results can only be compressed with up to "
            f"{MAX_LETTERS_IN_COMPRESSED_RESULT} letters. This result has {len(results)}."
        )
    packed = 0
    for i, r in enumerate(results):
        packed |= _RESULT_TO_CODE[r] << (2 * i)
    return packed


def compressed_result_for_guess(objective: str, guess: str) -> int:
    """Equivalent to compress_results(get_result_for_guess(...).results), without the objects."""
    if len(guess) > MAX_LETTERS_IN_COMPRESSED_RESULT:
        raise WordleError(
            f"Results can only be compressed with up to "
            f"{MAX_LETTERS_IN_COMPRESSED_RESULT} letters. This result has {len(guess)}."
        )
    packed = 0
    for i, code in enumerate(_result_codes(objective, guess)):
        packed |= code << (2 * i)
    return packed
