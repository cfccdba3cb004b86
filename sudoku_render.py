"""
Bordered text layouts for puzzles and grids.

Example (a solved grid)::

    9 8 6 | 3 2 4 | 1 5 7
    1 2 4 | 7 5 9 | 3 6 8
    5 3 7 | 8 6 1 | 4 2 9
    ------+-------+------
    4 1 3 | 2 8 5 | 9 7 6
    ...
"""

from __future__ import annotations

from typing import List, Sequence

from sudoku_grid import GridState, ParseError
from sudoku_parser import GIVEN_CHARS
from sudoku_topology import BASE, CELL_COUNT, SIZE

EMPTY_CELL = "."
ROW_SEPARATOR = "------+-------+------"


def _layout(cells: Sequence[str]) -> str:
    lines: List[str] = []
    for row in range(SIZE):
        if row % BASE == 0 and row != 0:
            lines.append(ROW_SEPARATOR)
        blocks = []
        for start in range(0, SIZE, BASE):
            offset = row * SIZE + start
            blocks.append(" ".join(cells[offset:offset + BASE]))
        lines.append(" | ".join(blocks))
    return "\n".join(lines)


def format_puzzle(puzzle: str) -> str:
    """Layout of the first 81 characters of an unsolved puzzle, '.' for unknowns."""

    if len(puzzle) < CELL_COUNT:
        raise ParseError(
            f"Puzzle must contain at least {CELL_COUNT} characters, got {len(puzzle)}."
        )
    return _layout(
        [char if char in GIVEN_CHARS else EMPTY_CELL for char in puzzle[:CELL_COUNT]]
    )


def format_grid(grid: GridState) -> str:
    """Layout of a grid; undetermined cells list all their candidates."""

    return _layout(
        [
            "".join(str(value) for value in sorted(grid[cell])) or EMPTY_CELL
            for cell in range(CELL_COUNT)
        ]
    )


__all__ = ["format_puzzle", "format_grid", "EMPTY_CELL"]
