from .core import (
    DEFAULT_MAX_TURNS,
    WORDLE_MAX_TURNS,
    GameResult,
    GameStatus,
    TurnData,
    play_game,
    run_batch,
)
from .io import format_summary, summarize_guess_counts, write_csv, write_manifest

__all__ = [
    "DEFAULT_MAX_TURNS",
    "WORDLE_MAX_TURNS",
    "GameResult",
    "GameStatus",
    "TurnData",
    "play_game",
    "run_batch",
    "format_summary",
    "summarize_guess_counts",
    "write_csv",
    "write_manifest",
]
