"""
Game harness core primitives.

- play_game:  run a single puzzle (one hidden objective) with a given guesser.
- run_batch:  replay many puzzles in sequence with the same guesser.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or a benchmark without changes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional

from wordsolver.engine.scoring import get_result_for_guess
from wordsolver.errors import ConflictingRestrictionError, GuesserUpdateError
from wordsolver.solvers.base import BaseGuesser

logger = logging.getLogger(__name__)

# The official Wordle turn budget.
WORDLE_MAX_TURNS = 6

# Turn budget for solving and benchmarking; high enough that any guesser
# eventually exhausts its candidates instead of running out of turns.
DEFAULT_MAX_TURNS = 128


class GameStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TurnData:
    """One guess and how many candidates remained when it was chosen."""
    guess: str
    num_possible_words_before_guess: int


@dataclass
class GameResult:
    status: GameStatus
    turns: List[TurnData] = field(default_factory=list)
    objective: str = ""
    time_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.status is GameStatus.SUCCESS

    @property
    def num_guesses(self) -> int:
        return len(self.turns)


def play_game(objective: str, max_turns: int, guesser: BaseGuesser) -> GameResult:
    """
    Execute one game until the guesser wins or the turn budget is exhausted.

    Args:
        objective:  the hidden word for this game
        max_turns:  number of guesses allowed
        guesser:    any BaseGuesser; it is reset first

    Returns:
        GameResult with SUCCESS (the last turn is the objective) or FAILURE
        (all max_turns guesses used).

    Raises:
        NoGuessAvailableError if the guesser runs out of candidates, which only
        happens when the objective is not in its bank.
        GuesserUpdateError if the guesser rejects the game's own feedback.
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")

    guesser.reset()
    turns: List[TurnData] = []

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        guess = guesser.select_next_guess()
        num_before = len(guesser.possible_words)
        result = get_result_for_guess(objective, guess)
        turns.append(TurnData(guess, num_before))
        logger.debug("Turn %d: %s -> %s (%d candidates before)",
                     turn, guess, result.pattern, num_before)

        if result.is_correct():
            return GameResult(GameStatus.SUCCESS, turns, objective,
                              (time.perf_counter() - t0) * 1000.0)

        try:
            guesser.update(result)
        except ConflictingRestrictionError as e:
            raise GuesserUpdateError(
                f"Failed to update the guesser with {guess} -> {result.pattern} "
                f"while solving {objective}: {e}"
            ) from e

    return GameResult(GameStatus.FAILURE, turns, objective,
                      (time.perf_counter() - t0) * 1000.0)


def run_batch(
        guesser: BaseGuesser,
        objectives: Iterable[str],
        *,
        max_turns: int = DEFAULT_MAX_TURNS,
        sample: Optional[int] = None,
        on_result: Optional[Callable[[GameResult], None]] = None,
) -> List[GameResult]:
    """
    Play every objective back-to-back with the same guesser (reset per game).
    If 'sample' is provided, only the first K objectives are used to speed up
    quick experiments.

    Games that fail within the turn limit are logged and returned, not raised.
    Errors from play_game propagate and stop the batch.
    """
    pool = list(objectives)
    if sample is not None:
        pool = pool[:sample]

    out: List[GameResult] = []
    for objective in pool:
        r = play_game(objective, max_turns, guesser)
        if not r.succeeded:
            logger.warning("Failed to guess %s within %d turns", objective, max_turns)
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out
