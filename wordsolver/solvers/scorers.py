"""
Word scorers: give every possible guess a comparable integer score, where the
highest score is the best guess.

A scorer follows the candidate set of one game:
  - reset(possible_words)          new game, full candidate set
  - update(guess, possible_words)  after each filtered guess
  - score_word(word)               pure, given the current state
  - copy(possible_words)           independent continuation

Two implementations:
  - RandomScorer: a random score per word, fixed until the next reset.
  - MaxEliminationsScorer: expected number of candidates eliminated (x1000).
"""

from __future__ import annotations

import random
from typing import Dict, Mapping, Optional

from wordsolver.datasets.word_bank import WordBank
from wordsolver.engine.constraints import PossibleWords
from .precompute import (
    DEFAULT_CHUNK_SIZE,
    compute_first_round_scores,
    expected_eliminations,
)


class WordScorer:
    id = "base"

    def copy(self, possible_words: Optional[PossibleWords] = None) -> "WordScorer":
        raise NotImplementedError("Override in subclass")

    def reset(self, possible_words: PossibleWords) -> None:
        raise NotImplementedError("Override in subclass")

    def update(self, latest_guess: str, possible_words: PossibleWords) -> None:
        raise NotImplementedError("Override in subclass")

    def score_word(self, word: str) -> int:
        raise NotImplementedError("Override in subclass")


class RandomScorer(WordScorer):
    """Baseline: random scores, so a max-score guesser guesses at random."""
    id = "random"

    MAX_SCORE = 1_000_000

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)
        self._scores: Dict[str, int] = {}

    def copy(self, possible_words: Optional[PossibleWords] = None) -> "RandomScorer":
        other = RandomScorer()
        other.rng.setstate(self.rng.getstate())
        other._scores = dict(self._scores)
        return other

    def reset(self, possible_words: PossibleWords) -> None:
        self._scores.clear()

    def update(self, latest_guess: str, possible_words: PossibleWords) -> None:
        pass

    def score_word(self, word: str) -> int:
        score = self._scores.get(word)
        if score is None:
            score = self.rng.randrange(self.MAX_SCORE)
            self._scores[word] = score
        return score


class MaxEliminationsScorer(WordScorer):
    """
    Scores a guess by the expected number of candidates it eliminates,
    assuming the objective is uniform over the current candidates.

    Round one (full bank) is precomputed in parallel at construction and
    shared by every copy. Later rounds are scored directly against the
    shrunk candidate set on each call.
    """
    id = "max_eliminations"

    def __init__(
            self,
            bank: WordBank,
            *,
            max_workers: int | None = None,
            chunk_size: int = DEFAULT_CHUNK_SIZE,
            first_round_scores: Optional[Mapping[str, int]] = None,
    ):
        self.bank = bank
        if first_round_scores is None:
            scores = compute_first_round_scores(
                bank.words, max_workers=max_workers, chunk_size=chunk_size)
            first_round_scores = dict(zip(bank.words, scores))
        self._first_round_scores = first_round_scores
        self._possible_words = bank.all_words()
        self._is_first_round = True

    @property
    def first_round_scores(self) -> Mapping[str, int]:
        return self._first_round_scores

    def copy(self, possible_words: Optional[PossibleWords] = None) -> "MaxEliminationsScorer":
        other = MaxEliminationsScorer(self.bank, first_round_scores=self._first_round_scores)
        other._possible_words = possible_words if possible_words is not None else self._possible_words
        other._is_first_round = self._is_first_round
        return other

    def reset(self, possible_words: PossibleWords) -> None:
        self._possible_words = possible_words
        self._is_first_round = True

    def update(self, latest_guess: str, possible_words: PossibleWords) -> None:
        self._possible_words = possible_words
        self._is_first_round = False

    def score_word(self, word: str) -> int:
        if self._is_first_round:
            score = self._first_round_scores.get(word)
            if score is not None:
                return score
        return expected_eliminations(word, self._possible_words.words)
