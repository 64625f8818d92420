"""
I/O and reporting utilities for game runs.

Responsibilities:
- summarize_guess_counts: histogram of guesses-to-win, with mean and std dev.
- format_summary:         the histogram as a small text table.
- write_csv:              flatten per-game results into a tidy CSV (one row per game).
- write_manifest:         JSON record of how a benchmark was run.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Sequence
import csv
import datetime as dt
import json
import math
import subprocess

from .core import GameResult


@dataclass
class GuessCountSummary:
    """counts[i] is the number of successful games that took i + 1 guesses."""
    counts: List[int]
    num_games: int
    num_failures: int
    mean: float
    std_dev: float


def summarize_guess_counts(results: Sequence[GameResult]) -> GuessCountSummary:
    """Histogram of successful games by number of guesses."""
    wins = [r.num_guesses for r in results if r.succeeded]
    counts = [0] * (max(wins) if wins else 0)
    for n in wins:
        counts[n - 1] += 1

    mean = sum(wins) / len(wins) if wins else 0.0
    var = sum((n - mean) ** 2 for n in wins) / len(wins) if wins else 0.0
    return GuessCountSummary(
        counts=counts,
        num_games=len(results),
        num_failures=len(results) - len(wins),
        mean=mean,
        std_dev=math.sqrt(var),
    )


def format_summary(summary: GuessCountSummary) -> str:
    """
    Example:
        Num guesses | Count
        --|---
        1 | 1
        2 | 106
        Average: 4.49 +/- 1.26
    """
    lines = ["Num guesses | Count"]
    for i, n in enumerate(summary.counts, start=1):
        lines.append("--|---")
        lines.append(f"{i} | {n}")
    lines.append(f"Average: {summary.mean:.2f} +/- {summary.std_dev:.2f}")
    if summary.num_failures:
        lines.append(f"Failed: {summary.num_failures} of {summary.num_games}")
    return "\n".join(lines)


def write_csv(results: List[GameResult], path: str, max_turns: int,
              guesser_id: str = "?") -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      guesser, objective, status, guesses, time_ms,
      guess_1, remaining_1, ..., guess_max_turns, remaining_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["guesser", "objective", "status", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"remaining_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "guesser": guesser_id,
                "objective": r.objective,
                "status": str(r.status),
                "guesses": r.num_guesses,
                "time_ms": round(float(r.time_ms), 3),
            }

            # Expand turns into fixed columns
            for i in range(1, max_turns + 1):
                if i <= len(r.turns):
                    td = r.turns[i - 1]
                    row[f"guess_{i}"] = td.guess
                    row[f"remaining_{i}"] = td.num_possible_words_before_guess
                else:
                    row[f"guess_{i}"] = ""
                    row[f"remaining_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(path: str, *, run_id: str, config: Dict, summary: GuessCountSummary,
                   word_bank_size: int) -> str:
    """
    Record how a benchmark was run next to its CSV: the run id, the commit
    it ran at, the CLI configuration and the guess-count summary.
    """
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config,
        "word_bank_size": word_bank_size,
        "num_games": summary.num_games,
        "summary": asdict(summary),
    }
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id usable in file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                              capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip()
