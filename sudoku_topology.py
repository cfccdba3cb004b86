"""
Static 9x9 board topology: units, per-cell units and peers.

Cells are indexed 0-80 in row-major order (index = row * 9 + col). The
structure is computed once per process by ``build()`` and shared by every
grid and every search branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Tuple

BASE = 3  # 9x9 数独由 3x3 的小宫格组成
SIZE = BASE * BASE
CELL_COUNT = SIZE * SIZE
DIGITS: FrozenSet[int] = frozenset(range(1, SIZE + 1))

Unit = FrozenSet[int]


@dataclass(frozen=True)
class Topology:
    unit_list: Tuple[Unit, ...]
    units: Tuple[Tuple[Unit, ...], ...]
    peers: Tuple[FrozenSet[int], ...]


def _row_units() -> Tuple[Unit, ...]:
    return tuple(frozenset(range(SIZE * i, SIZE * i + SIZE)) for i in range(SIZE))


def _column_units() -> Tuple[Unit, ...]:
    return tuple(frozenset(range(i, CELL_COUNT, SIZE)) for i in range(SIZE))


def _box_units() -> Tuple[Unit, ...]:
    boxes = []
    for i in range(SIZE):
        top_left = (i // BASE) * SIZE * BASE + (i % BASE) * BASE
        boxes.append(
            frozenset(
                top_left + r * SIZE + c for r in range(BASE) for c in range(BASE)
            )
        )
    return tuple(boxes)


@lru_cache(maxsize=None)
def build() -> Topology:
    """Return the shared topology, computing it on first use."""

    unit_list = _row_units() + _column_units() + _box_units()
    units = tuple(
        tuple(unit for unit in unit_list if cell in unit) for cell in range(CELL_COUNT)
    )
    peers = tuple(
        frozenset().union(*units[cell]) - {cell} for cell in range(CELL_COUNT)
    )
    return Topology(unit_list=unit_list, units=units, peers=peers)


def units_of(cell: int) -> Tuple[Unit, ...]:
    """The row, column and box containing ``cell``."""

    return build().units[cell]


def peers_of(cell: int) -> FrozenSet[int]:
    """Every cell sharing a unit with ``cell``, excluding ``cell`` itself."""

    return build().peers[cell]


__all__ = [
    "Topology",
    "Unit",
    "build",
    "units_of",
    "peers_of",
    "BASE",
    "SIZE",
    "CELL_COUNT",
    "DIGITS",
]
