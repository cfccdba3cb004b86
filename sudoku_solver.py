"""
数独求解器 (Sudoku Solver)
使用约束传播 + 深度优先搜索解决 9x9 数独问题
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from sudoku_grid import Contradiction, GridState, ParseError
from sudoku_parser import parse_grid
from sudoku_search import search


class SolveError(Enum):
    """求解失败的原因"""

    PARSE = "parse"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class SolveResult:
    grid: Optional[GridState] = None
    error: Optional[SolveError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None and self.grid is not None

    @property
    def solution(self) -> Optional[str]:
        """81 位数字组成的解，失败时为 None"""
        return self.grid.values() if self.ok else None


def solve(puzzle: str) -> SolveResult:
    """
    解决一道数独题目

    Args:
        puzzle: 至少 81 个字符，'1'-'9' 为已知数字，其余字符表示空格

    Returns:
        SolveResult: 成功时包含完整棋盘，否则 error 为 PARSE 或 UNSOLVABLE
    """
    try:
        grid = parse_grid(puzzle)
    except ParseError as exc:
        logger.debug("Parse error: {}", exc)
        return SolveResult(error=SolveError.PARSE, message=str(exc))
    except Contradiction as exc:
        logger.debug("Givens contradict each other: {}", exc)
        return SolveResult(error=SolveError.UNSOLVABLE, message=str(exc))

    # 传播后已经解出，无需搜索
    if grid.is_solved():
        logger.debug("Solved by propagation alone")
        return SolveResult(grid=grid)

    solved = search(grid)
    if solved is None:
        logger.debug("Search exhausted every candidate")
        return SolveResult(error=SolveError.UNSOLVABLE, message="No solution exists.")

    logger.debug("Solved by search")
    return SolveResult(grid=solved)


__all__ = ["solve", "SolveResult", "SolveError"]
