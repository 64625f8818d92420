from __future__ import annotations
from enum import Enum
from typing import Dict, Type

from wordsolver.datasets.word_bank import WordBank
from wordsolver.engine.constraints import PossibleWords
from wordsolver.engine.scoring import GuessResult

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


class GuessMode(Enum):
    """Which words a max-score guesser may choose from."""
    # Any word in the bank that has not been guessed yet.
    ALL = "all"
    # Only the remaining possible words.
    POSSIBLE = "possible"


# ---- Base class that guessers inherit ----
class BaseGuesser:
    """
    Guesses words to solve one puzzle at a time.

    Lifecycle: reset() -> (select_next_guess() -> update(result))* -> reset() ...
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, bank: WordBank):
        self.bank = bank
        self._possible_words: PossibleWords = bank.all_words()

    @property
    def possible_words(self) -> PossibleWords:
        """Read access to the remaining candidates; replaced on every reset()."""
        return self._possible_words

    def copy(self) -> "BaseGuesser":
        raise NotImplementedError("Override in subclass")

    def reset(self) -> None:
        raise NotImplementedError("Override in subclass")

    def update(self, result: GuessResult) -> None:
        raise NotImplementedError("Override in subclass")

    def select_next_guess(self) -> str:
        """
        Raises NoGuessAvailableError if no candidates remain.
        """
        raise NotImplementedError("Override in subclass")
