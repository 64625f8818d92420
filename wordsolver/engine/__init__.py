from .scoring import (
    GuessResult,
    LetterResult,
    compress_results,
    compressed_result_for_guess,
    get_result_for_guess,
)
from .restrictions import LetterRestriction, PresentLetter, WordRestrictions
from .constraints import PossibleWords, filter_candidates
from .validation import normalize_word, validate_guess

__all__ = [
    "GuessResult",
    "LetterResult",
    "compress_results",
    "compressed_result_for_guess",
    "get_result_for_guess",
    "LetterRestriction",
    "PresentLetter",
    "WordRestrictions",
    "PossibleWords",
    "filter_candidates",
    "normalize_word",
    "validate_guess",
]
