"""
Grid state for the propagation solver.

A ``GridState`` maps every cell (0-80) to the set of digits still possible
there. Propagation mutates it in place; search clones it before each guess.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from sudoku_topology import CELL_COUNT, DIGITS, SIZE


class ParseError(ValueError):
    """The puzzle text is malformed (shorter than 81 characters)."""


class Contradiction(Exception):
    """Some cell or unit can no longer satisfy the Sudoku constraints."""


class GridState:
    """Candidate sets for all 81 cells."""

    __slots__ = ("candidates",)

    def __init__(self, candidates: Optional[Iterable[Set[int]]] = None) -> None:
        if candidates is None:
            self.candidates: List[Set[int]] = [set(DIGITS) for _ in range(CELL_COUNT)]
        else:
            self.candidates = [set(values) for values in candidates]
            if len(self.candidates) != CELL_COUNT:
                raise ValueError(
                    f"Grid must have {CELL_COUNT} cells, got {len(self.candidates)}."
                )

    def __getitem__(self, cell: int) -> Set[int]:
        return self.candidates[cell]

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return self.candidates == other.candidates

    def __repr__(self) -> str:
        return f"GridState({self.values()!r})"

    def copy(self) -> "GridState":
        """Independent clone; no candidate set is shared with the original."""

        return GridState(self.candidates)

    def is_solved(self) -> bool:
        return all(len(values) == 1 for values in self.candidates)

    def has_empty_cell(self) -> bool:
        return any(not values for values in self.candidates)

    def candidate_count(self) -> int:
        return sum(len(values) for values in self.candidates)

    def value_at(self, cell: int) -> Optional[int]:
        values = self.candidates[cell]
        if len(values) == 1:
            return next(iter(values))
        return None

    def values(self) -> str:
        """81-character row-major string, '.' for undetermined cells."""

        return "".join(
            str(value) if value is not None else "."
            for value in (self.value_at(cell) for cell in range(CELL_COUNT))
        )

    def to_board(self) -> List[List[int]]:
        """9x9 board of ints, 0 for undetermined cells."""

        return [
            [self.value_at(row * SIZE + col) or 0 for col in range(SIZE)]
            for row in range(SIZE)
        ]


__all__ = ["GridState", "ParseError", "Contradiction"]
