import pytest
from apps.cli.run import main
from wordsolver.datasets import write_word_file

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer"]


def test_solve(tmp_path, capsys):
    bank = write_word_file(WORDS, tmp_path / "words.txt")
    code = main(["-w", bank, "-g", "random", "--seed", "1", "solve", "TRACE"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solved!" in out
    assert "trace" in out


def test_solve_unknown_word(tmp_path, capsys):
    bank = write_word_file(WORDS, tmp_path / "words.txt")
    assert main(["-w", bank, "-g", "random", "solve", "zzzzz"]) == 1
    assert "not present in the word bank" in capsys.readouterr().err


def test_bench_writes_reports(tmp_path, capsys):
    bank = write_word_file(WORDS, tmp_path / "words.txt")
    bench = write_word_file(WORDS[:3], tmp_path / "bench.txt")
    outdir = tmp_path / "reports"
    code = main(["-w", bank, "--workers", "1", "bench", "-b", bench,
                 "--progress", "off", "--outdir", str(outdir)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Num guesses | Count" in out
    assert len(list(outdir.glob("bench_*.csv"))) == 1
    assert len(list(outdir.glob("bench_*_manifest.json"))) == 1


def test_missing_word_bank(tmp_path, capsys):
    assert main(["-w", str(tmp_path / "missing.txt"), "solve", "crane"]) == 1


def test_word_bank_is_required(capsys):
    with pytest.raises(SystemExit):
        main(["solve", "crane"])
    assert "--word_bank" in capsys.readouterr().err
