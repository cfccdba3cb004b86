"""
Command-line front end for the Sudoku solver.

Usage examples
--------------

Solve a single puzzle:

    python sudoku_cli.py --puzzle "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"

Solve every puzzle of a file or URL (one puzzle per line, or a JSON dataset):

    python sudoku_cli.py --file top95.txt
    python sudoku_cli.py --file http://magictour.free.fr/top95

Average solve times over several runs and keep a JSON summary:

    python sudoku_cli.py --file top95.txt --average 5 --summary results/top95.json

Without ``--puzzle`` or ``--file`` an interactive menu is shown.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

from loguru import logger

from puzzle_source import PuzzleSourceError, SourceConfig, load_puzzles
from sudoku_benchmark import benchmark, summarize, time_solve, write_summary
from sudoku_render import format_grid, format_puzzle
from sudoku_solver import SolveError

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
SEPARATOR = "=" * 20


def solve_and_print(puzzle: str, out: Optional[TextIO] = None) -> bool:
    out = out or sys.stdout
    timed = time_solve(puzzle)
    result = timed.result

    if result.error is SolveError.PARSE:
        print(f"Parse Error: {result.message}", file=out)
        return False
    if not result.ok:
        print("Failed to solve Sudoku... skipping", file=out)
        return False

    print("\n[Unsolved Grid]", file=out)
    print(format_puzzle(puzzle), file=out)
    print("\n[Solved Grid]", file=out)
    print(format_grid(result.grid), file=out)
    print(f"\n=> Successfully solved in {timed.elapsed:.6f} seconds", file=out)
    print(SEPARATOR, file=out)
    return True


def solve_all(puzzles: Iterable[str], out: Optional[TextIO] = None) -> int:
    """Solve each puzzle in turn; returns the number of failures."""

    out = out or sys.stdout
    failures = 0
    for puzzle in puzzles:
        if not solve_and_print(puzzle, out):
            failures += 1
    return failures


def run_file(
    location: str,
    *,
    average: Optional[int] = None,
    summary: Optional[Path] = None,
    config: Optional[SourceConfig] = None,
    out: Optional[TextIO] = None,
) -> int:
    out = out or sys.stdout
    puzzles = load_puzzles(location, config)
    if average is None:
        return solve_all(puzzles, out)

    timings = benchmark(puzzles, iterations=average)
    for timing in timings:
        print(
            f"Puzzle {timing.index + 1}: {timing.mean:.6f} seconds avg.",
            file=out,
        )
    if summary is not None:
        path = write_summary(summary, timings)
        logger.info("Summary written to {}", path)
    stats = summarize(timings)
    return stats["puzzle_count"] - stats["solved_count"]


def display_options(out: TextIO) -> None:
    print("(1) Enter a sudoku to solve", file=out)
    print("(2) Solve sudoku from file", file=out)
    print("(0) Quit\n", file=out)


def interactive(
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    config: Optional[SourceConfig] = None,
) -> None:
    out = out or sys.stdout
    print("-------------\nSudoku Solver\n-------------", file=out)
    while True:
        display_options(out)
        try:
            choice = read("...").strip()
        except EOFError:
            break

        if choice == "1":
            print("Enter a sudoku: ", file=out)
            print("(Format: 1~9 for numbers, any other character for empty spaces)", file=out)
            solve_and_print(read(""), out)
        elif choice == "2":
            filename = read("Filename: ").strip()
            if not filename:
                print("Filename not supplied.", file=out)
                continue
            try:
                run_file(filename, config=config, out=out)
            except PuzzleSourceError as exc:
                print(f"Error: {exc}", file=out)
        elif choice == "0":
            break
        else:
            print("Invalid option.", file=out)

    print("Exiting...", file=out)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve 9x9 Sudoku puzzles with constraint propagation and search."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle",
        type=str,
        default=None,
        help="Puzzle string: 1-9 for givens, any other character for empty cells.",
    )
    source.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path or http(s) URL of a puzzle file (one per line) or JSON dataset.",
    )
    parser.add_argument(
        "--average",
        type=int,
        default=None,
        help="With --file: solve each puzzle N times and report average times.",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="With --average: write a JSON timing summary to this path.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds for URL sources (default: SUDOKU_REQUEST_TIMEOUT or 30).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv("SUDOKU_LOG_LEVEL", "WARNING"),
        choices=LOG_LEVELS,
        help="Logging level for console output (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write DEBUG logs to this file.",
    )

    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    if args.average is not None and args.file is None:
        parser.error("--average requires --file")
    if args.average is not None and args.average < 1:
        parser.error("--average must be >= 1")
    if args.summary is not None and args.average is None:
        parser.error("--summary requires --average")
    return args


def configure_logging(level: str, log_file: Optional[Path] = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        logger.add(log_file, level="DEBUG", encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    config = (
        SourceConfig(request_timeout=args.timeout)
        if args.timeout is not None
        else SourceConfig()
    )

    if args.puzzle is not None:
        return 0 if solve_and_print(args.puzzle) else 1

    if args.file is not None:
        try:
            failures = run_file(
                args.file,
                average=args.average,
                summary=args.summary,
                config=config,
            )
        except PuzzleSourceError as exc:
            logger.error("{}", exc)
            return 2
        return 0 if failures == 0 else 1

    interactive(config=config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
