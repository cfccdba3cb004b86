"""
Solve-time benchmarking for puzzle collections.

Each puzzle is solved ``iterations`` times; per-puzzle timings are reported
as mean/median/min/max and can be written to a JSON summary.
"""

from __future__ import annotations

import json
import statistics
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from sudoku_solver import SolveResult, solve


@dataclass
class TimedSolve:
    result: SolveResult
    elapsed: float


@dataclass
class PuzzleTiming:
    index: int
    puzzle: str
    solved: bool
    error: Optional[str] = None
    solution: Optional[str] = None
    durations: List[float] = field(default_factory=list)

    @property
    def mean(self) -> float:
        return statistics.mean(self.durations) if self.durations else 0.0

    @property
    def median(self) -> float:
        return statistics.median(self.durations) if self.durations else 0.0

    def to_dict(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "puzzle": self.puzzle,
            "solved": self.solved,
            "error": self.error,
            "solution": self.solution,
            "iterations": len(self.durations),
            "mean_seconds": self.mean,
            "median_seconds": self.median,
            "min_seconds": min(self.durations) if self.durations else 0.0,
            "max_seconds": max(self.durations) if self.durations else 0.0,
        }


def time_solve(puzzle: str) -> TimedSolve:
    start = time.perf_counter()
    result = solve(puzzle)
    return TimedSolve(result=result, elapsed=time.perf_counter() - start)


def benchmark(puzzles: Iterable[str], iterations: int = 1) -> List[PuzzleTiming]:
    if iterations < 1:
        raise ValueError("iterations must be >= 1.")

    timings: List[PuzzleTiming] = []
    for index, puzzle in enumerate(puzzles):
        timing = PuzzleTiming(index=index, puzzle=puzzle, solved=False)
        for _ in range(iterations):
            timed = time_solve(puzzle)
            timing.durations.append(timed.elapsed)
            timing.solved = timed.result.ok
            timing.error = timed.result.error.value if timed.result.error else None
            timing.solution = timed.result.solution

        logger.info(
            "Puzzle {}: {} {:.6f} seconds avg. over {} run(s)",
            index + 1,
            "✓" if timing.solved else "✗",
            timing.mean,
            iterations,
        )
        timings.append(timing)
    return timings


def summarize(timings: Sequence[PuzzleTiming]) -> Dict[str, object]:
    means = [timing.mean for timing in timings if timing.solved]
    return {
        "puzzle_count": len(timings),
        "solved_count": sum(timing.solved for timing in timings),
        "parse_errors": sum(timing.error == "parse" for timing in timings),
        "unsolvable": sum(timing.error == "unsolvable" for timing in timings),
        "average_seconds": statistics.mean(means) if means else None,
        "median_seconds": statistics.median(means) if means else None,
        "slowest_seconds": max(means) if means else None,
    }


def write_summary(path: Path, timings: Sequence[PuzzleTiming]) -> Path:
    payload = {
        "summary": summarize(timings),
        "puzzles": [timing.to_dict() for timing in timings],
        "created_at": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)
    return path


__all__ = [
    "TimedSolve",
    "PuzzleTiming",
    "time_solve",
    "benchmark",
    "summarize",
    "write_summary",
]
