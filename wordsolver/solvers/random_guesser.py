"""
Random guesser.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed.
  - This is a baseline to verify the pipeline; it does not try to maximize
    information gain.
"""

from __future__ import annotations

import random

from wordsolver.datasets.word_bank import WordBank
from wordsolver.engine.scoring import GuessResult
from wordsolver.errors import NoGuessAvailableError
from .base import BaseGuesser, register


@register
class RandomGuesser(BaseGuesser):
    id = "random"
    name = "Random Possible Word"
    version = "1.0.0"

    def __init__(self, bank: WordBank, *, seed: int | None = None):
        super().__init__(bank)
        self.rng = random.Random(seed)

    def copy(self) -> "RandomGuesser":
        """Keeps the current candidates and resumes from the same random state."""
        other = RandomGuesser(self.bank)
        other.rng.setstate(self.rng.getstate())
        other._possible_words = self._possible_words.copy()
        return other

    def reset(self) -> None:
        self._possible_words = self.bank.all_words()

    def update(self, result: GuessResult) -> None:
        self._possible_words.filter(result)

    def select_next_guess(self) -> str:
        n = len(self._possible_words)
        if n == 0:
            raise NoGuessAvailableError("No more valid guesses.")
        return self._possible_words[self.rng.randrange(n)]
