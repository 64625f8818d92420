from __future__ import annotations
from typing import List

from wordsolver.datasets.word_bank import WordBank
from .base import BaseGuesser, GuessMode, REGISTRY, register
from .scorers import MaxEliminationsScorer, RandomScorer, WordScorer

from . import random_guesser  # noqa: F401
from . import max_score  # noqa: F401

from .random_guesser import RandomGuesser
from .max_score import MaxScoreGuesser

# Built from a registered guesser plus a specific scorer.
MAX_ELIMINATIONS = "max_eliminations"


def create_guesser(
        guesser_id: str,
        bank: WordBank,
        *,
        guess_mode: GuessMode | str = GuessMode.ALL,
        seed: int | None = None,
        max_workers: int | None = None,
) -> BaseGuesser:
    """
    Factory: build a ready-to-play guesser by id.

      - "random":           RandomGuesser
      - "max_eliminations": MaxScoreGuesser over a MaxEliminationsScorer
                            (runs the first-round precompute)
      - "max_score":        MaxScoreGuesser over a RandomScorer
    """
    mode = GuessMode(guess_mode)
    if guesser_id == MAX_ELIMINATIONS:
        scorer = MaxEliminationsScorer(bank, max_workers=max_workers)
        return MaxScoreGuesser(bank, scorer, guess_mode=mode)
    try:
        cls = REGISTRY[guesser_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown guesser id: {guesser_id}. Available: {get_guesser_ids()}") from e
    if cls is MaxScoreGuesser:
        return MaxScoreGuesser(bank, RandomScorer(seed), guess_mode=mode)
    return cls(bank, seed=seed)


def get_guesser_ids() -> List[str]:
    """
    Return all guesser ids accepted by create_guesser (sorted for stable CLI help).
    """
    return sorted(set(REGISTRY) | {MAX_ELIMINATIONS})


__all__ = [
    "BaseGuesser",
    "GuessMode",
    "MaxEliminationsScorer",
    "MaxScoreGuesser",
    "RandomGuesser",
    "RandomScorer",
    "REGISTRY",
    "WordScorer",
    "create_guesser",
    "get_guesser_ids",
    "register",
]
