from __future__ import annotations

import json

import pytest

from sudoku_benchmark import benchmark, summarize, time_solve, write_summary

from tests.puzzles import EASY, HARD, HARD_SOLUTION


def test_time_solve() -> None:
    timed = time_solve(HARD)

    assert timed.result.solution == HARD_SOLUTION
    assert timed.elapsed >= 0.0


def test_benchmark_runs_each_puzzle_n_times() -> None:
    timings = benchmark([EASY, HARD[:40], "11" + "." * 79], iterations=3)

    assert [len(timing.durations) for timing in timings] == [3, 3, 3]
    assert [timing.solved for timing in timings] == [True, False, False]
    assert [timing.error for timing in timings] == [None, "parse", "unsolvable"]
    assert timings[0].mean >= 0.0
    assert timings[0].median >= 0.0


def test_benchmark_rejects_zero_iterations() -> None:
    with pytest.raises(ValueError):
        benchmark([EASY], iterations=0)


def test_summarize_counts_outcomes() -> None:
    stats = summarize(benchmark([EASY, HARD[:40], "11" + "." * 79]))

    assert stats["puzzle_count"] == 3
    assert stats["solved_count"] == 1
    assert stats["parse_errors"] == 1
    assert stats["unsolvable"] == 1
    assert stats["average_seconds"] is not None


def test_summarize_empty() -> None:
    stats = summarize([])

    assert stats["puzzle_count"] == 0
    assert stats["average_seconds"] is None


def test_write_summary(tmp_path) -> None:
    path = write_summary(tmp_path / "out" / "summary.json", benchmark([HARD], iterations=2))

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["summary"]["solved_count"] == 1
    assert payload["puzzles"][0]["iterations"] == 2
    assert payload["puzzles"][0]["solution"] == HARD_SOLUTION
