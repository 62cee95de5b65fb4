import pytest

from wordle_entropy.__main__ import main, parse_hint
from wordle_entropy.feedback import MalformedFeedback

from conftest import OTHER_WORDS, T_WORDS


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(T_WORDS + OTHER_WORDS) + "\n", encoding="utf-8")
    return str(path)


def test_opening_guesses(words_file, capsys):
    assert main(["--words", words_file]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "1. tares"


def test_ranked_guesses(words_file, capsys):
    assert main(["--words", words_file, "--seed", "1", "--hint", "tares:Ggggg"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(line.split(". ")[1].startswith("t") for line in lines)


def test_missing_dictionary(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "nope.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_bad_hint(words_file, capsys):
    assert main(["--words", words_file, "--hint", "tares"]) == 2
    assert main(["--words", words_file, "--hint", "tares:GGGGX"]) == 2


def test_solve(words_file, capsys):
    assert main(["--words", words_file, "--seed", "0", "--solve", "thumb"]) == 0
    assert "thumb" in capsys.readouterr().out


def test_parse_hint():
    assert parse_hint("tares:Ggggg").hint == "Ggggg"
    with pytest.raises(MalformedFeedback):
        parse_hint("tares-Ggggg")


def test_benchmark(words_file, capsys):
    assert main(["--words", words_file, "--seed", "3", "--benchmark", "2"]) == 0
    assert capsys.readouterr().out.startswith("2 games in")


@pytest.mark.parametrize("n", ["0", "-4", "many"])
def test_benchmark_needs_positive_count(words_file, n):
    with pytest.raises(SystemExit) as exc:
        main(["--words", words_file, "--benchmark", n])
    assert exc.value.code == 2
