"""
深度优先搜索：当约束传播无法继续时，选择候选数最少的格子逐个尝试。

每个分支在复制出的棋盘上赋值，失败时直接丢弃副本，不需要撤销操作。
找到第一个解后立即返回，不枚举其余解。
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from sudoku_grid import Contradiction, GridState
from sudoku_propagation import assign
from sudoku_topology import CELL_COUNT


def select_branch_cell(grid: GridState) -> Optional[int]:
    """选择候选数大于 1 且最少的格子（MRV），并列时取下标最小者。"""

    best_cell: Optional[int] = None
    best_count = 0
    for cell in range(CELL_COUNT):
        count = len(grid[cell])
        if count > 1 and (best_cell is None or count < best_count):
            best_cell = cell
            best_count = count
            if count == 2:
                break  # 不可能更少
    return best_cell


def search(grid: GridState, depth: int = 0) -> Optional[GridState]:
    """
    在传播后的棋盘上搜索一个完整解。

    Returns:
        GridState: 每个格子恰好一个候选值的解。
        None: 该分支无解，调用方应回溯。
    """

    if grid.has_empty_cell():
        return None
    cell = select_branch_cell(grid)
    if cell is None:
        return grid  # 已全部确定

    for value in sorted(grid[cell]):
        branch = grid.copy()
        try:
            assign(branch, cell, value)
        except Contradiction as exc:
            logger.trace("depth={} cell={} value={} rejected: {}", depth, cell, value, exc)
            continue

        logger.trace("depth={} cell={} value={} accepted", depth, cell, value)
        solved = search(branch, depth + 1)
        if solved is not None:
            return solved

    return None


__all__ = ["search", "select_branch_cell"]
