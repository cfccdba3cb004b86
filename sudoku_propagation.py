"""
Constraint propagation for 9x9 Sudoku.

Two rules are applied transitively:

1. If a cell has only one candidate left, that value is removed from all of
   its peers.
2. If a unit has only one cell left that admits a value, the value is
   assigned to that cell.

``eliminate`` and ``assign`` call each other and share the grid they are
given. Both raise ``Contradiction`` when a cell runs out of candidates or a
value runs out of places in a unit; the grid is then partially updated and
must be discarded by the caller.

Every recursive call is triggered by a strict reduction of some candidate set,
so the total number of candidates on the grid bounds the recursion.
"""

from __future__ import annotations

from sudoku_grid import Contradiction, GridState
from sudoku_topology import DIGITS, build


def eliminate(grid: GridState, cell: int, value: int) -> GridState:
    """Remove ``value`` from ``cell`` and propagate the consequences."""

    candidates = grid[cell]
    if value not in candidates:
        return grid  # 已经被排除

    candidates.discard(value)
    if not candidates:
        raise Contradiction(f"cell {cell} has no candidates left")

    topology = build()

    # 规则 1：只剩一个候选值时，从所有同伴格中排除它
    if len(candidates) == 1:
        remaining = next(iter(candidates))
        for peer in topology.peers[cell]:
            eliminate(grid, peer, remaining)

    # 规则 2：某个单元中 value 只剩一个位置时，直接填入
    for unit in topology.units[cell]:
        places = [other for other in unit if value in grid[other]]
        if not places:
            raise Contradiction(f"value {value} has no place left in a unit of cell {cell}")
        if len(places) == 1:
            assign(grid, places[0], value)

    return grid


def assign(grid: GridState, cell: int, value: int) -> GridState:
    """Make ``value`` the only candidate of ``cell`` by eliminating the rest."""

    for other in sorted(DIGITS - {value}):
        eliminate(grid, cell, other)
    return grid


__all__ = ["eliminate", "assign"]
