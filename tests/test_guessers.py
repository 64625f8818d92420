import pytest
from wordsolver.datasets import WordBank
from wordsolver.engine import GuessResult
from wordsolver.errors import ConflictingRestrictionError, NoGuessAvailableError
from wordsolver.solvers import (
    GuessMode,
    MaxEliminationsScorer,
    MaxScoreGuesser,
    RandomGuesser,
    RandomScorer,
    create_guesser,
    get_guesser_ids,
)


def test_random_guesser_select_next_guess():
    bank = WordBank(["abc", "bcd", "def"])
    guesser = RandomGuesser(bank, seed=1)
    assert guesser.select_next_guess() in bank


def test_random_guesser_update_narrows_guesses():
    bank = WordBank(["abc", "bcd", "cde"])
    guesser = RandomGuesser(bank, seed=1)
    guesser.update(GuessResult.from_pattern("bcd", "YY-"))
    assert guesser.select_next_guess() == "abc"


def test_random_guesser_exhaustion_then_conflict():
    bank = WordBank(["abc", "bcd", "cde"])
    guesser = RandomGuesser(bank, seed=1)
    guesser.update(GuessResult.from_pattern("abc", "--Y"))
    guesser.update(GuessResult.from_pattern("bcd", "-Y-"))
    # No words are possible, but the results so far are consistent.
    with pytest.raises(NoGuessAvailableError, match="No more valid guesses."):
        guesser.select_next_guess()

    with pytest.raises(ConflictingRestrictionError,
                       match="Can't set letter to not here at index 0 since it's already "
                             "marked as here."):
        guesser.update(GuessResult.from_pattern("cde", "Y--"))


def test_random_guesser_reset_and_copy():
    bank = WordBank(["abc", "bcd", "cde"])
    guesser = RandomGuesser(bank, seed=1)
    guesser.update(GuessResult.from_pattern("bcd", "YY-"))
    other = guesser.copy()
    guesser.reset()
    assert len(guesser.possible_words) == 3
    assert other.possible_words.words == ["abc"]


def _max_eliminations(bank, mode=GuessMode.ALL):
    return MaxScoreGuesser(bank, MaxEliminationsScorer(bank, max_workers=1), guess_mode=mode)


def test_max_score_all_mode_can_guess_a_non_candidate():
    bank = WordBank(["cod", "wod", "mod", "mwc"])
    guesser = _max_eliminations(bank)
    guesser.update(GuessResult.from_pattern("zod", "-GG"))
    assert guesser.possible_words.words == ["cod", "wod", "mod"]
    # Every candidate eliminates 1.33 on average; mwc splits them all.
    assert guesser.select_next_guess() == "mwc"


def test_max_score_possible_mode_only_guesses_candidates():
    bank = WordBank(["cod", "wod", "mod", "mwc"])
    guesser = _max_eliminations(bank, GuessMode.POSSIBLE)
    guesser.update(GuessResult.from_pattern("zod", "-GG"))
    assert guesser.select_next_guess() == "cod"


def test_max_score_two_candidates_guesses_a_candidate():
    bank = WordBank(["cod", "wod", "mwc"])
    guesser = _max_eliminations(bank)
    guesser.update(GuessResult.from_pattern("zod", "-GG"))
    assert guesser.select_next_guess() == "cod"


def test_max_score_first_guess_uses_first_round_scores():
    bank = WordBank(["cod", "wod", "mod", "mwc"])
    guesser = _max_eliminations(bank)
    assert guesser.select_next_guess() == "mwc"


def test_max_score_update_marks_word_guessed():
    bank = WordBank(["cod", "wod", "mod", "mwc"])
    guesser = _max_eliminations(bank)
    guesser.update(GuessResult.from_pattern("mwc", "--Y"))
    assert "mwc" not in guesser.unguessed_words
    assert guesser.possible_words.words == ["cod"]
    assert guesser.select_next_guess() == "cod"


def test_max_score_copy_is_independent():
    bank = WordBank(["cod", "wod", "mod", "mwc"])
    guesser = _max_eliminations(bank)
    other = guesser.copy()
    other.update(GuessResult.from_pattern("zod", "-GG"))
    assert other.select_next_guess() == "mwc"
    assert len(guesser.possible_words) == 4
    assert other.scorer.first_round_scores is guesser.scorer.first_round_scores

    other.reset()
    assert len(other.possible_words) == 4


def test_max_score_empty_raises():
    bank = WordBank(["abc", "bcd", "cde"])
    guesser = MaxScoreGuesser(bank, RandomScorer(seed=3))
    guesser.update(GuessResult.from_pattern("abc", "--Y"))
    guesser.update(GuessResult.from_pattern("bcd", "-Y-"))
    with pytest.raises(NoGuessAvailableError):
        guesser.select_next_guess()


def test_get_guesser_ids():
    assert get_guesser_ids() == ["max_eliminations", "max_score", "random"]


def test_create_guesser():
    bank = WordBank(["abc", "bcd", "cde"])
    assert isinstance(create_guesser("random", bank, seed=1), RandomGuesser)

    g = create_guesser("max_score", bank, guess_mode="possible", seed=1)
    assert isinstance(g, MaxScoreGuesser) and isinstance(g.scorer, RandomScorer)
    assert g.guess_mode is GuessMode.POSSIBLE

    g = create_guesser("max_eliminations", bank, max_workers=1)
    assert isinstance(g.scorer, MaxEliminationsScorer)
    assert g.guess_mode is GuessMode.ALL


def test_create_guesser_unknown_id():
    with pytest.raises(ValueError, match="Unknown guesser id"):
        create_guesser("nope", WordBank(["abc"]))


def test_random_guesser_copy_leaves_random_stream_alone():
    bank = WordBank(["abc", "bcd", "cde", "def", "efg", "fgh"])
    guesser = RandomGuesser(bank, seed=5)
    twin = RandomGuesser(bank, seed=5)
    other = guesser.copy()
    expected = [twin.select_next_guess() for _ in range(20)]
    assert [guesser.select_next_guess() for _ in range(20)] == expected
    assert [other.select_next_guess() for _ in range(20)] == expected
