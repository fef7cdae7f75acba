"""
Grid parsing utilities for gridkit.

Turns raw puzzle-style text into grids and coordinate lists:
1. Character grids (one element per character)
2. Digit grids (one int per character)
3. Token grids (one element per separator-split token)
4. Position lists ("x, y" per line) and direction strings
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from grid_types import Direction, Point2
from gridkit import Grid

__all__ = [
    "parse_char_grid",
    "parse_digit_grid",
    "parse_directions",
    "parse_positions",
    "parse_token_grid",
    "split_lines",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def split_lines(text: str) -> list[str]:
    """
    Split text into lines, dropping a single trailing newline.

    Interior blank lines are kept, so "a\\n\\nb" gives ["a", "", "b"].
    """
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def parse_char_grid(text: str) -> Grid[str]:
    """
    Parse a block of text into a grid of single characters.

    Example:
        "#.\\n.#" -> 2x2 grid [["#", "."], [".", "#"]]

    Raises:
        ValueError: If the lines have differing lengths
    """
    return Grid(list(line) for line in split_lines(text))


def parse_digit_grid(text: str) -> Grid[int]:
    """
    Parse a block of digits into a grid of ints, one per character.

    Raises:
        ValueError: If a character is not a digit, or the lines have differing lengths
    """
    lines = split_lines(text)
    rows: list[list[int]] = []

    for row_idx, line in enumerate(lines):
        row: list[int] = []
        for col_idx, char in enumerate(line):
            if char not in "0123456789":
                error_msg = (
                    f"Invalid digit: '{char}'\n"
                    f"  Row {row_idx}: \"{line}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Every character must be a digit (0-9)"
                )
                raise ValueError(error_msg)
            row.append(int(char))
        rows.append(row)

    return Grid(rows)


def parse_token_grid(
    text: str,
    separator: str | None = None,
    convert: Callable[[str], T] = str,  # type: ignore[assignment]
) -> Grid[T]:
    """
    Parse lines of separated tokens into a grid, converting each token.

    Args:
        text: One grid row per line
        separator: Token separator; None splits on runs of whitespace
        convert: Applied to every token, e.g. int

    Returns:
        Grid with one element per token
    """
    return Grid(
        [convert(token) for token in line.split(separator)]
        for line in split_lines(text)
    )


def parse_positions(text: str) -> list[Point2]:
    """Parse one "x, y" point per line, skipping blank lines."""
    return [Point2.parse(line) for line in split_lines(text) if line.strip()]


def parse_directions(text: str, skip_unknown: bool = False) -> list[Direction]:
    """
    Parse a string of direction characters (arrows, NESW or URDL).

    Whitespace is always ignored.

    Args:
        text: The direction characters
        skip_unknown: Drop unrecognized characters instead of failing

    Raises:
        ValueError: On an unrecognized character, unless skip_unknown is set
    """
    directions: list[Direction] = []
    skipped = 0

    for index, char in enumerate(text):
        if char.isspace():
            continue
        direction = Direction.from_char(char)
        if direction is None:
            if skip_unknown:
                skipped += 1
                continue
            raise ValueError(
                f"Invalid direction character: '{char}'\n"
                f"  Position: {index}\n"
                f"  Valid formats:\n"
                f"    - Arrows: ↑ → ↓ ← or ^ > v <\n"
                f"    - Compass letters: N E S W\n"
                f"    - URDL letters: U R D L"
            )
        directions.append(direction)

    if skipped:
        logger.debug("parse_directions: skipped %d unrecognized characters", skipped)
    return directions
