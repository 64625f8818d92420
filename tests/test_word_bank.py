import pytest
from wordsolver.datasets import WordBank, read_word_file, write_word_file
from wordsolver.errors import EmptyWordBankError, InconsistentWordLengthsError


@pytest.mark.parametrize("lines", [[], ["", "  "], ["  \n", "  "]])
def test_from_lines_with_no_words(lines):
    with pytest.raises(EmptyWordBankError, match="At least one word must be provided."):
        WordBank.from_lines(lines)


def test_empty_list():
    with pytest.raises(EmptyWordBankError):
        WordBank([])


@pytest.mark.parametrize("words", [
    ["abc", "bcd", "efgh"],
    ["bad", "rad", "good"],
])
def test_different_length_words(words):
    with pytest.raises(InconsistentWordLengthsError,
                       match="Words must all be the same length. Encountered word with "
                             "length 4 when expecting length 3."):
        WordBank(words)


def test_words_are_trimmed_and_lowered():
    bank = WordBank(["abc", " bcd ", "ef£", "XYZ"])
    assert bank.words == ("abc", "bcd", "ef£", "xyz")
    assert bank.word_length == 3
    assert len(bank) == 4
    assert "bcd" in bank and "BCD" not in bank


def test_all_words_is_fresh_each_time():
    bank = WordBank(["foo", "bar"])
    pw = bank.all_words()
    assert len(pw) == 2
    pw.remove("foo")
    assert len(bank.all_words()) == 2
    assert pw.word_length == 3


def test_from_path(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("# five letter words\ncrane\n\n Raise\nstare\n", encoding="utf-8")
    bank = WordBank.from_path(p)
    assert list(bank) == ["crane", "raise", "stare"]


def test_from_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordBank.from_path(tmp_path / "missing.txt")


def test_word_file_round_trip(tmp_path):
    path = write_word_file(["crane", "raise"], tmp_path / "out" / "words.txt")
    assert read_word_file(path) == ["crane", "raise"]
