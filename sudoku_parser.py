"""Turn puzzle text into a propagated ``GridState``."""

from __future__ import annotations

from typing import Sequence

from sudoku_grid import GridState, ParseError
from sudoku_propagation import assign
from sudoku_topology import CELL_COUNT, SIZE

GIVEN_CHARS = "123456789"


def parse_grid(text: str) -> GridState:
    """
    Build the initial grid for a puzzle string.

    The first 81 characters are read in row-major order; '1'-'9' are givens,
    any other character is an unknown cell. Later characters are ignored.

    Raises:
        ParseError: the text is shorter than 81 characters.
        Contradiction: the givens conflict with each other.
    """

    if len(text) < CELL_COUNT:
        raise ParseError(
            f"Puzzle must contain at least {CELL_COUNT} characters, got {len(text)}."
        )

    grid = GridState()
    for cell, char in enumerate(text[:CELL_COUNT]):
        if char in GIVEN_CHARS:
            assign(grid, cell, int(char))
    return grid


def board_to_puzzle(board: Sequence[Sequence[int]]) -> str:
    """Convert a 9x9 board of ints (0 for empty) into an 81-character puzzle."""

    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError(f"Board must be {SIZE}x{SIZE}.")
    return "".join(
        str(value) if isinstance(value, int) and 1 <= value <= 9 else "."
        for row in board
        for value in row
    )


__all__ = ["parse_grid", "board_to_puzzle", "GIVEN_CHARS"]
