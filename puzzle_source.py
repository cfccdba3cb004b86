"""
Load puzzles from local files or HTTP(S) URLs.

Supported formats:
- Line files (e.g. top95.txt, Kaggle's sudoku.csv): one puzzle per line.
  Only blank lines are skipped; everything else is handed to the solver,
  which reports short lines as parse errors.
- JSON datasets: ``{"puzzles": [{"puzzle": [[...], ...]}, ...]}`` with 0 for
  empty cells; each board is converted to an 81-character puzzle string.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import requests
from loguru import logger

from sudoku_parser import board_to_puzzle
from sudoku_topology import SIZE


class PuzzleSourceError(RuntimeError):
    """Puzzles could not be read from the given location."""


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class SourceConfig:
    request_timeout: float = field(
        default_factory=lambda: _env_float("SUDOKU_REQUEST_TIMEOUT", 30.0)
    )
    encoding: str = "utf-8"


def is_remote(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def fetch_text(url: str, config: SourceConfig) -> str:
    logger.debug("GET {url} | timeout={timeout}", url=url, timeout=config.request_timeout)
    try:
        response = requests.get(url, timeout=config.request_timeout)
    except requests.RequestException as exc:
        raise PuzzleSourceError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code >= 400:
        raise PuzzleSourceError(f"{url} returned HTTP {response.status_code}")

    response.encoding = response.encoding or config.encoding
    logger.debug(
        "Response {url} | status={status} bytes={size}",
        url=url,
        status=response.status_code,
        size=len(response.content),
    )
    return response.text


def read_text(location: str, config: SourceConfig) -> str:
    if is_remote(location):
        return fetch_text(location, config)

    path = Path(location).expanduser()
    try:
        return path.read_text(encoding=config.encoding)
    except OSError as exc:
        raise PuzzleSourceError(f"Cannot read puzzle file {path}: {exc}") from exc


def puzzles_from_dataset(payload: Any) -> List[str]:
    puzzles = payload.get("puzzles") if isinstance(payload, dict) else None
    if not isinstance(puzzles, list):
        raise PuzzleSourceError("Invalid dataset: missing 'puzzles' list.")
    if payload.get("size", SIZE) != SIZE:
        raise PuzzleSourceError(f"Dataset size {payload.get('size')} is not {SIZE}x{SIZE}.")

    result: List[str] = []
    for index, entry in enumerate(puzzles):
        board = entry.get("puzzle") if isinstance(entry, dict) else None
        if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
            raise PuzzleSourceError(f"Entry {index} missing 'puzzle' grid.")
        if len(board) != SIZE or any(len(row) != SIZE for row in board):
            raise PuzzleSourceError(f"Entry {index} is not a 9x9 board.")
        result.append(board_to_puzzle(board))
    return result


def puzzles_from_lines(text: str) -> List[str]:
    return [line for line in text.splitlines() if line.strip()]


def load_puzzles(location: str, config: Optional[SourceConfig] = None) -> List[str]:
    """
    Read every puzzle stored at ``location``.

    Args:
        location: local path or http(s) URL
        config: timeouts and encoding; defaults to ``SourceConfig()``

    Returns:
        Puzzle strings in file order.
    """

    config = config or SourceConfig()
    text = read_text(location, config)

    if location.lower().endswith(".json"):
        try:
            payload = json.loads(text)
        except ValueError as exc:
            raise PuzzleSourceError(f"Malformed JSON dataset {location}: {exc}") from exc
        puzzles = puzzles_from_dataset(payload)
    else:
        puzzles = puzzles_from_lines(text)

    logger.debug("Loaded {} puzzle(s) from {}", len(puzzles), location)
    return puzzles


__all__ = [
    "load_puzzles",
    "SourceConfig",
    "PuzzleSourceError",
    "is_remote",
]
