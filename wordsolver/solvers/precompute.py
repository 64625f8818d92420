"""
Parallel first-round precompute for the expected-eliminations scorer.

Before any feedback, the candidate set is the whole bank, so every bank word's
score can be computed once and reused by every game (and every copy of the
scorer). That is O(n^2) feedback computations, so it is split across processes:

  - guess indices are cut into fixed-size chunks
  - a ProcessPoolExecutor sized to the CPU count works through them, with at
    most 2 * max_workers chunks in flight
  - each chunk's scores land in its own disjoint slice of a pre-sized list
  - the first failure stops new submissions; in-flight chunks are still
    awaited before that failure is raised
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import FIRST_COMPLETED, Future, ProcessPoolExecutor, wait
from itertools import islice
from typing import Iterator, List, Optional, Sequence, Set, Tuple

import numpy as np

from wordsolver.engine.scoring import compressed_result_for_guess

logger = logging.getLogger(__name__)

# Scores are expected eliminations scaled by this factor and floored.
SCORE_SCALE = 1000

DEFAULT_CHUNK_SIZE = 64


def expected_eliminations(guess: str, candidates: Sequence[str]) -> int:
    """
    Expected number of candidates eliminated by guessing `guess`, assuming
    the objective is uniform over `candidates`, scaled by SCORE_SCALE.

    Candidates are partitioned by the feedback they would give; a partition
    of size k eliminates n - k words with probability k / n, so the total is
    sum(k * (n - k)) / n.
    """
    n = len(candidates)
    if n == 0:
        return 0
    codes = np.fromiter(
        (compressed_result_for_guess(objective, guess) for objective in candidates),
        dtype=np.int64,
        count=n,
    )
    _, counts = np.unique(codes, return_counts=True)
    total = int(np.sum(counts * (n - counts)))
    return total * SCORE_SCALE // n


# ---- worker side (module-level for pickling) ----

_WORKER_WORDS: Tuple[str, ...] = ()


def _init_worker(words: Tuple[str, ...]) -> None:
    global _WORKER_WORDS
    _WORKER_WORDS = words


def _score_chunk(bounds: Tuple[int, int]) -> Tuple[int, List[int]]:
    start, stop = bounds
    words = _WORKER_WORDS
    return start, [expected_eliminations(words[i], words) for i in range(start, stop)]


# ---- coordinator ----

def _chunk_bounds(n: int, chunk_size: int) -> Iterator[Tuple[int, int]]:
    for start in range(0, n, chunk_size):
        yield start, min(start + chunk_size, n)


def compute_first_round_scores(
        words: Sequence[str],
        *,
        max_workers: Optional[int] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[int]:
    """
    Score every word in `words` as a guess against all of `words`.

    Returns:
      List[int] aligned with `words`.

    Raises:
      the first error raised by any chunk, once all in-flight chunks finish.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive; got {chunk_size}")
    words = tuple(words)
    n = len(words)
    scores = [0] * n
    if n == 0:
        return scores

    if max_workers is None:
        max_workers = os.cpu_count() or 1
    max_workers = max(1, min(max_workers, (n + chunk_size - 1) // chunk_size))
    max_in_flight = 2 * max_workers

    logger.info("Precomputing first-round scores for %d words (%d workers, chunk size %d)",
                n, max_workers, chunk_size)
    t0 = time.perf_counter()

    chunks = _chunk_bounds(n, chunk_size)
    first_error: Optional[BaseException] = None

    with ProcessPoolExecutor(max_workers=max_workers, initializer=_init_worker,
                             initargs=(words,)) as executor:
        pending: Set[Future] = {
            executor.submit(_score_chunk, bounds) for bounds in islice(chunks, max_in_flight)
        }

        while pending:
            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for fut in done:
                error = fut.exception()
                if error is not None:
                    if first_error is None:
                        logger.error("First-round chunk failed: %s", error)
                        first_error = error
                    continue
                start, chunk_scores = fut.result()
                scores[start:start + len(chunk_scores)] = chunk_scores
                if first_error is None:
                    bounds = next(chunks, None)
                    if bounds is not None:
                        pending.add(executor.submit(_score_chunk, bounds))

    if first_error is not None:
        raise first_error

    logger.info("First-round scores ready in %.2fs", time.perf_counter() - t0)
    return scores
