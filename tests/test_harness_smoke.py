import csv
import json

import pytest
from wordsolver.datasets import WordBank
from wordsolver.errors import (
    ConflictingRestrictionError,
    GuesserUpdateError,
    NoGuessAvailableError,
)
from wordsolver.harness import (
    DEFAULT_MAX_TURNS,
    GameResult,
    GameStatus,
    TurnData,
    format_summary,
    play_game,
    run_batch,
    summarize_guess_counts,
    write_csv,
    write_manifest,
)
from wordsolver.solvers import BaseGuesser, RandomGuesser, create_guesser

SMALL_BANK = ["abcz", "weyz", "defy", "ghix"]

SWEEP_BANK = [
    "crane", "raise", "stare", "trace", "cared", "racer", "scoop", "sassy",
    "mesas", "level", "belle", "lemon", "eerie", "geese", "llama", "added",
]


@pytest.fixture(params=["random", "max_eliminations"])
def guesser_id(request):
    return request.param


def test_play_game_smoke():
    bank = WordBank(["abc", "bcd", "cde"])
    r = play_game("bcd", 3, RandomGuesser(bank, seed=42))
    assert r.status is GameStatus.SUCCESS
    assert r.objective == "bcd"
    assert r.turns[-1].guess == "bcd"
    assert r.turns[0].num_possible_words_before_guess == 3


def test_play_game_unknown_word(guesser_id):
    guesser = create_guesser(guesser_id, WordBank(SMALL_BANK), seed=42, max_workers=1)
    with pytest.raises(NoGuessAvailableError, match="No more valid guesses."):
        play_game("nope", 10, guesser)


def test_play_game_known_word(guesser_id):
    guesser = create_guesser(guesser_id, WordBank(SMALL_BANK), seed=42, max_workers=1)
    r = play_game("abcz", 10, guesser)
    assert r.succeeded
    assert r.num_guesses <= 4
    assert r.turns[-1].guess == "abcz"


def test_play_game_out_of_turns():
    bank = WordBank(["abc", "bcd", "cde"])
    guesser = create_guesser("max_eliminations", bank, max_workers=1)
    r = play_game("bcd", 1, guesser)
    assert r.status is GameStatus.FAILURE
    assert r.turns == [TurnData("abc", 3)]


def test_play_game_rejects_non_positive_turns():
    guesser = RandomGuesser(WordBank(["abc"]))
    with pytest.raises(ValueError):
        play_game("abc", 0, guesser)


class _RejectingGuesser(BaseGuesser):
    id = "rejecting"

    def reset(self):
        pass

    def update(self, result):
        raise ConflictingRestrictionError("rejected")

    def select_next_guess(self):
        return self.bank.words[0]


def test_play_game_wraps_update_conflicts():
    guesser = _RejectingGuesser(WordBank(["abc", "bcd"]))
    with pytest.raises(GuesserUpdateError) as excinfo:
        play_game("bcd", 5, guesser)
    assert isinstance(excinfo.value.__cause__, ConflictingRestrictionError)


def test_every_objective_is_solved(guesser_id):
    bank = WordBank(SWEEP_BANK)
    guesser = create_guesser(guesser_id, bank, seed=7, max_workers=2)
    results = run_batch(guesser, bank, max_turns=DEFAULT_MAX_TURNS)
    assert [r.objective for r in results] == list(bank)
    assert all(r.succeeded for r in results)
    assert all(r.num_guesses <= len(bank) for r in results)


def test_run_batch_sample_and_callback():
    bank = WordBank(SWEEP_BANK)
    seen = []
    results = run_batch(RandomGuesser(bank, seed=3), bank, sample=3, on_result=seen.append)
    assert len(results) == 3
    assert seen == results


def _result(num_guesses, status=GameStatus.SUCCESS, objective="crane"):
    turns = [TurnData(objective, 1) for _ in range(num_guesses)]
    return GameResult(status, turns, objective, 1.5)


def test_summarize_guess_counts():
    results = [_result(2), _result(2), _result(3), _result(6, GameStatus.FAILURE)]
    summary = summarize_guess_counts(results)
    assert summary.counts == [0, 2, 1]
    assert summary.num_games == 4
    assert summary.num_failures == 1
    assert summary.mean == pytest.approx(7 / 3)

    text = format_summary(summary)
    assert text.startswith("Num guesses | Count")
    assert "2 | 2" in text
    assert "Failed: 1 of 4" in text


def test_summarize_no_games():
    summary = summarize_guess_counts([])
    assert summary.counts == []
    assert summary.mean == 0.0


def test_write_csv(tmp_path):
    results = [_result(1), _result(2, objective="raise")]
    path = write_csv(results, str(tmp_path / "out" / "runs.csv"), max_turns=2, guesser_id="random")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["objective"] for r in rows] == ["crane", "raise"]
    assert rows[0]["status"] == "success"
    assert rows[0]["guess_1"] == "crane" and rows[0]["guess_2"] == ""
    assert rows[1]["remaining_2"] == "1"


def test_write_manifest(tmp_path):
    summary = summarize_guess_counts([_result(1), _result(3)])
    path = write_manifest(str(tmp_path / "manifest.json"), run_id="20250101T000000Z",
                          config={"guesser": "random", "seed": 1}, summary=summary,
                          word_bank_size=10)
    with open(path, encoding="utf-8") as f:
        manifest = json.load(f)
    assert manifest["run_id"] == "20250101T000000Z"
    assert manifest["config"] == {"guesser": "random", "seed": 1}
    assert manifest["num_games"] == 2
    assert manifest["summary"]["counts"] == [1, 0, 1]
    assert manifest["git_commit"]


@pytest.mark.parametrize("objective", ["abc", "bcd", "cde"])
def test_max_eliminations_solves_three_word_bank(objective):
    guesser = create_guesser("max_eliminations", WordBank(["abc", "bcd", "cde"]), max_workers=1)
    r = play_game(objective, 3, guesser)
    assert r.status is GameStatus.SUCCESS
