from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from cli.spell.app import DEMO_WORDS, app, load_words, suggest


def _suggestions(output: str) -> list[str]:
    # Operation logs may share the captured stream; keep only CLI lines.
    return [line for line in output.splitlines() if line.startswith("Did you mean")]


def test_cli_suggests_from_demo_words() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["inInvald"])

    assert result.exit_code == 0
    assert "Found misspell word 'inInvald'." in result.output.splitlines()
    lines = _suggestions(result.output)
    assert "Did you mean 'isInvalid'?" in lines
    assert "Did you mean 'valid'?" not in lines
    assert "Did you mean 'validated'?" not in lines


def test_cli_reads_word_list(tmp_path: Path) -> None:
    runner = CliRunner()
    words = tmp_path / "words.txt"
    words.write_text("book\nbooks\n\nboo\nboon\ncook\ncake\ncape\ncart\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["bo", "--words", str(words), "--max-dist", "2", "--show-distance"],
    )

    assert result.exit_code == 0
    assert _suggestions(result.output) == [
        "Did you mean 'book'? (2)",
        "Did you mean 'boo'? (1)",
        "Did you mean 'boon'? (2)",
    ]


def test_cli_sorts_by_distance(tmp_path: Path) -> None:
    runner = CliRunner()
    words = tmp_path / "words.txt"
    words.write_text("book\nbooks\nboo\nboon\n", encoding="utf-8")

    result = runner.invoke(app, ["bo", "--words", str(words), "--sort"])

    assert result.exit_code == 0
    assert _suggestions(result.output)[0] == "Did you mean 'boo'?"


def test_cli_hamming_metric() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["isValix", "--metric", "hamming", "--max-dist", "1"])

    assert result.exit_code == 0
    assert "Did you mean 'isValid'?" in _suggestions(result.output)


def test_cli_missing_word_list_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["word", "--words", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1


def test_cli_rejects_negative_distance() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["word", "--max-dist", "-1"])

    assert result.exit_code == 2


def test_load_words_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text(" alpha \n\n beta\n", encoding="utf-8")

    assert load_words(path) == ["alpha", "beta"]


def test_suggest_returns_matches_with_distances() -> None:
    matches = suggest("valid", DEMO_WORDS, max_dist=0)

    assert matches == [("valid", 0)]
