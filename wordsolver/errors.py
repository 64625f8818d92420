"""
Error taxonomy shared by the engine, solvers and harness.

Every failure surfaces as one of these; none are retried internally.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for all wordsolver errors."""


class LengthMismatchError(WordleError, ValueError):
    """A guess, result or word does not have the expected length."""


class ConflictingRestrictionError(WordleError, ValueError):
    """New feedback contradicts what is already known about the objective."""


class NoGuessAvailableError(WordleError):
    """The candidate set is empty, so there is nothing left to guess."""


class EmptyWordBankError(WordleError, ValueError):
    """A word bank was built from zero words."""


class InconsistentWordLengthsError(WordleError, ValueError):
    """A word bank was built from words of different lengths."""


class GuesserUpdateError(WordleError):
    """
    A guesser rejected feedback produced by the game loop itself.

    This can only happen if the restriction engine is wrong, so it is treated
    as a fatal invariant violation rather than a game outcome.
    """
