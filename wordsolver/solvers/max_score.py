"""
Max-score guesser.

Idea:
  Ask a WordScorer for every allowed guess and pick the highest score.
  With MaxEliminationsScorer this is "the guess expected to eliminate the
  most remaining candidates".

Guess modes:
  - ALL:      score every unguessed bank word while more than two candidates
              remain. If every unguessed word ties, the first candidate is
              guessed instead.
  - POSSIBLE: only score the remaining candidates (faster, slightly worse).

Ties go to the earliest word in bank order.
"""

from __future__ import annotations

import logging

from wordsolver.datasets.word_bank import WordBank
from wordsolver.engine.scoring import GuessResult
from wordsolver.errors import NoGuessAvailableError
from .base import BaseGuesser, GuessMode, register
from .scorers import WordScorer

logger = logging.getLogger(__name__)


@register
class MaxScoreGuesser(BaseGuesser):
    id = "max_score"
    name = "Max Score"
    version = "1.0.0"

    # At or below this many candidates, only candidates are considered.
    CANDIDATE_ONLY_LIMIT = 2

    def __init__(self, bank: WordBank, scorer: WordScorer, *,
                 guess_mode: GuessMode = GuessMode.ALL):
        super().__init__(bank)
        self.scorer = scorer
        self.guess_mode = GuessMode(guess_mode)
        self._unguessed_words = bank.all_words()
        self.scorer.reset(self._possible_words)

    @property
    def unguessed_words(self):
        return self._unguessed_words

    def copy(self) -> "MaxScoreGuesser":
        """Independent continuation; the scorer's first-round work is shared."""
        other = MaxScoreGuesser.__new__(MaxScoreGuesser)
        other.bank = self.bank
        other.guess_mode = self.guess_mode
        other._possible_words = self._possible_words.copy()
        other._unguessed_words = self._unguessed_words.copy()
        other.scorer = self.scorer.copy(other._possible_words)
        return other

    def reset(self) -> None:
        self._possible_words = self.bank.all_words()
        self._unguessed_words = self.bank.all_words()
        self.scorer.reset(self._possible_words)

    def update(self, result: GuessResult) -> None:
        self._unguessed_words.remove(result.guess)
        self._possible_words.filter(result)
        self.scorer.update(result.guess, self._possible_words)

    def select_next_guess(self) -> str:
        possible = self._possible_words
        if len(possible) == 0:
            raise NoGuessAvailableError("No more valid guesses.")

        unguessed = self._unguessed_words
        if (self.guess_mode is GuessMode.ALL
                and len(possible) > self.CANDIDATE_ONLY_LIMIT
                and len(unguessed) > 0):
            score = self.scorer.score_word
            best_word = unguessed[0]
            best_score = score(best_word)
            all_same = True
            for word in unguessed.words[1:]:
                s = score(word)
                if s != best_score:
                    all_same = False
                    if s > best_score:
                        best_score, best_word = s, word
            if all_same:
                logger.debug("All %d unguessed words tie at %d; guessing a candidate",
                             len(unguessed), best_score)
                return possible[0]
            return best_word

        return possible.maximizing(self.scorer.score_word)
