from __future__ import annotations

import io
import json

import pytest

import sudoku_cli
from sudoku_cli import interactive, main, parse_args, solve_and_print

from tests.puzzles import EASY, HARD


def test_solve_and_print_success() -> None:
    out = io.StringIO()

    assert solve_and_print(HARD, out)

    text = out.getvalue()
    assert "[Unsolved Grid]" in text
    assert "[Solved Grid]" in text
    assert "4 1 7 | 3 6 9 | 8 2 5" in text
    assert "Successfully solved in" in text


def test_solve_and_print_failures() -> None:
    out = io.StringIO()

    assert not solve_and_print("123", out)
    assert not solve_and_print("55" + "." * 79, out)

    text = out.getvalue()
    assert "Parse Error" in text
    assert "Failed to solve Sudoku" in text


def test_main_single_puzzle(capsys) -> None:
    assert main(["--puzzle", HARD]) == 0
    assert "[Solved Grid]" in capsys.readouterr().out


def test_main_file_keeps_going_after_failures(tmp_path, capsys) -> None:
    path = tmp_path / "puzzles.txt"
    path.write_text(f"{HARD}\nshort\n{EASY}\n", encoding="utf-8")

    assert main(["--file", str(path)]) == 1

    out = capsys.readouterr().out
    assert out.count("[Solved Grid]") == 2
    assert "Parse Error" in out


def test_main_average_writes_summary(tmp_path, capsys) -> None:
    path = tmp_path / "puzzles.txt"
    path.write_text(f"{HARD}\n{EASY}\n", encoding="utf-8")
    summary = tmp_path / "summary.json"

    assert main(["--file", str(path), "--average", "2", "--summary", str(summary)]) == 0

    out = capsys.readouterr().out
    assert "Puzzle 1:" in out
    assert "Puzzle 2:" in out
    assert json.loads(summary.read_text(encoding="utf-8"))["summary"]["solved_count"] == 2


def test_main_missing_file(tmp_path) -> None:
    assert main(["--file", str(tmp_path / "missing.txt")]) == 2


def test_average_requires_file() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--average", "3"])


def test_log_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_LOG_LEVEL", "DEBUG")

    assert parse_args([]).log_level == "DEBUG"


def test_interactive_menu(tmp_path) -> None:
    path = tmp_path / "puzzles.txt"
    path.write_text(f"{EASY}\n", encoding="utf-8")
    answers = iter(["1", HARD, "2", str(path), "2", str(tmp_path / "nope.txt"), "7", "0"])
    out = io.StringIO()

    interactive(read=lambda prompt: next(answers), out=out)

    text = out.getvalue()
    assert text.count("[Solved Grid]") == 2
    assert "Error:" in text
    assert "Invalid option." in text
    assert text.rstrip().endswith("Exiting...")


def test_interactive_stops_on_eof() -> None:
    def _eof(prompt: str) -> str:
        raise EOFError

    out = io.StringIO()
    interactive(read=_eof, out=out)

    assert "Exiting..." in out.getvalue()


def test_main_uses_interactive_without_source(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(sudoku_cli, "interactive", lambda config: calls.append(config))

    assert main([]) == 0
    assert len(calls) == 1


def test_zero_timeout_is_passed_through(monkeypatch, tmp_path) -> None:
    configs = []

    def _run_file(location, *, average, summary, config):
        configs.append(config)
        return 0

    monkeypatch.setattr(sudoku_cli, "run_file", _run_file)

    assert main(["--file", str(tmp_path / "p.txt"), "--timeout", "0"]) == 0
    assert configs[0].request_timeout == 0.0


def test_invalid_log_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_LOG_LEVEL", "VERBOSE")

    with pytest.raises(SystemExit):
        parse_args([])
