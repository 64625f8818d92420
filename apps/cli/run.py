# apps/cli/run.py
"""
CLI entry point for wordsolver.

Subcommands:
  solve WORD   Play one game against WORD and print every guess together with
               how many candidates remained before it.
  bench        Replay every word of a benchmark list, print a histogram of
               guesses-to-win, and optionally write a CSV + JSON manifest.

Examples:
  python -m apps.cli.run --word_bank words.txt solve crane
  python -m apps.cli.run -w words.txt --guesser random bench --bench_list bench.txt --outdir reports
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordsolver.datasets import WordBank
from wordsolver.engine import normalize_word, validate_guess
from wordsolver.errors import WordleError
from wordsolver.harness import (
    DEFAULT_MAX_TURNS,
    GameStatus,
    format_summary,
    play_game,
    run_batch,
    summarize_guess_counts,
)
from wordsolver.harness.io import timestamp_id, write_csv, write_manifest
from wordsolver.solvers import GuessMode, create_guesser, get_guesser_ids


def _print_turns(result) -> None:
    for i, td in enumerate(result.turns, 1):
        print(f"\t{i}: {td.guess} ({td.num_possible_words_before_guess} remaining)")


def _solve(args, bank: WordBank, guesser) -> int:
    objective = normalize_word(args.word)
    if len(objective) != bank.word_length:
        sys.stderr.write(f"The objective word's length ({len(objective)}) must match "
                         f"the word bank ({bank.word_length}).\n")
        return 1
    if not validate_guess(objective, bank):
        sys.stderr.write(f"The objective word ({objective}) is not present in the word bank. "
                         f"Try another.\n")
        return 1

    result = play_game(objective, args.max_turns, guesser)
    if result.status is GameStatus.SUCCESS:
        print(f"Solved! It took me {result.num_guesses} guesses.")
    else:
        print("Failed :( I couldn't guess the word within the guess limit.")
    _print_turns(result)
    print(f"Guessing took {result.time_ms:.1f} ms.")
    return 0


def _bench(args, bank: WordBank, guesser) -> int:
    objectives = list(WordBank.from_path(args.bench_list))
    if args.sample is not None:
        objectives = objectives[:args.sample]
    missing = [w for w in objectives if w not in bank]
    if missing:
        sys.stderr.write(f"{len(missing)} benchmark word(s) are not in the word bank "
                         f"(e.g., {missing[:5]}).\n")
        return 1

    progress = args.progress
    if progress == "auto":
        progress = "bar" if sys.stderr.isatty() else "off"

    start = time.time()
    bar = tqdm(total=len(objectives), ncols=80, desc="Running", unit="game",
               disable=progress != "bar")
    with bar:
        results = run_batch(guesser, objectives, max_turns=args.max_turns,
                            on_result=lambda _r: bar.update(1))
    elapsed = time.time() - start

    summary = summarize_guess_counts(results)
    print(f"Benchmark completed in {elapsed:.2f}s.")
    print(format_summary(summary))

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"bench_{run_id}.csv"
        manifest_path = outdir / f"bench_{run_id}_manifest.json"
        write_csv(results, str(csv_path), max_turns=max((r.num_guesses for r in results), default=1),
                  guesser_id=args.guesser)
        write_manifest(str(manifest_path), run_id=run_id,
                       config={k: v for k, v in vars(args).items() if k != "func"},
                       summary=summary, word_bank_size=len(bank))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0 if summary.num_failures == 0 else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="wordsolver: solve Wordle puzzles algorithmically")
    ap.add_argument("--word_bank", "-w", required=True,
                    help="path to the word bank (one word per line)")
    ap.add_argument("--guesser", "-g", default="max_eliminations",
                    help=f"guesser id (one of: {', '.join(get_guesser_ids())})")
    ap.add_argument("--guess_mode", choices=[m.value for m in GuessMode],
                    default=GuessMode.ALL.value,
                    help="max-score guessers: choose from all unguessed words or only possible ones")
    ap.add_argument("--max_turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="guess limit per game")
    ap.add_argument("--seed", type=int, help="RNG seed (random guessers)")
    ap.add_argument("--workers", type=int, help="processes for the first-round precompute")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="solve a single puzzle")
    solve.add_argument("word", help="the objective word")
    solve.set_defaults(func=_solve)

    bench = sub.add_parser("bench", help="benchmark against a list of objective words")
    bench.add_argument("--bench_list", "-b", required=True,
                       help="path to the objective words to benchmark against")
    bench.add_argument("--sample", type=int, help="only play the first K objectives")
    bench.add_argument("--outdir", help="directory for CSV + manifest output")
    bench.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                       help="show run progress (auto=bar when stderr is a terminal)")
    bench.set_defaults(func=_bench)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    start = time.time()
    try:
        bank = WordBank.from_path(args.word_bank)
        guesser = create_guesser(args.guesser, bank, guess_mode=args.guess_mode,
                                 seed=args.seed, max_workers=args.workers)
        code = args.func(args, bank, guesser)
    except (WordleError, ValueError, OSError) as e:
        sys.stderr.write(f"{e}\n")
        return 1
    print(f"Command took {time.time() - start:.2f}s.")
    return code


if __name__ == "__main__":
    sys.exit(main())
