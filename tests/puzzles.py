"""Shared puzzle fixtures for the test suite."""

from __future__ import annotations

from typing import Sequence

from sudoku_topology import build

HARD = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"
HARD_SOLUTION = "417369825632158947958724316825437169791586432346912758289643571573291684164875293"

# Solved by propagation alone, no search needed.
EASY = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"

BLANK = "." * 81


def assert_valid_solution(solution: str, puzzle: str = BLANK) -> None:
    assert len(solution) == 81
    digits = set("123456789")
    for unit in build().unit_list:
        assert {solution[cell] for cell in unit} == digits
    for given, value in zip(puzzle[:81], solution):
        if given in digits:
            assert value == given


def sizes(candidates: Sequence[set]) -> list:
    return [len(values) for values in candidates]
