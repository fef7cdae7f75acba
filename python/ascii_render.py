"""
Text rendering for gridkit grids.

Provides:
1. The plain description convention (right-aligned elements, one line per row)
2. Indexed rendering for character grids and binary images for boolean grids
3. Box rendering with a title and highlighted cells
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import cycle, islice
from typing import TYPE_CHECKING, Any, Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Point2

if TYPE_CHECKING:
    from gridkit import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderStyle:
    """Options governing how grids are drawn."""

    cell_width: int = 3  # Characters per cell in boxed rendering
    present: str = "██"  # Binary image glyph for truthy cells
    absent: str = "··"  # Binary image glyph for falsy cells
    border: bool = True  # Draw a box around boxed renderings


DEFAULT_STYLE = RenderStyle()


# =============================================================================
# Description Convention
# =============================================================================


def content_lines(grid: Grid[Any]) -> list[str]:
    """
    Render each row as one line, every element right-aligned to the widest one.

    Elements are converted with str() and separated by single spaces.
    """
    descriptions = grid.map(str)
    max_length = max((len(text) for text in descriptions.elements()), default=0)
    return [
        " ".join(text.rjust(max_length) for text in row)
        for row in descriptions.rows
    ]


def describe(grid: Grid[Any]) -> str:
    """Multi-line description: the content lines indented inside `Grid(...)`."""
    body = "\n".join(f"\t{line}" for line in content_lines(grid))
    return f"Grid(\n{body}\n)"


def _index_chars(count: int) -> list[str]:
    return [str(i) for i in islice(cycle(range(10)), count)]


def describe_chars(grid: Grid[str]) -> str:
    """
    Render a grid of single characters with column and row indices.

    Indices count 0-9 and repeat, so every column stays one character wide.
    """
    header = " " + "".join(f" {char}" for char in _index_chars(grid.width))
    rows = [
        f"{index} {line}"
        for index, line in zip(_index_chars(grid.height), content_lines(grid))
    ]
    return "\n".join([header] + rows)


def binary_image(grid: Grid[Any], style: RenderStyle = DEFAULT_STYLE) -> str:
    """Render truthy cells as `style.present` and falsy ones as `style.absent`."""
    return "\n".join(
        "".join(style.present if cell else style.absent for cell in row)
        for row in grid.rows
    )


# =============================================================================
# Boxed Rendering
# =============================================================================


def render_grid_boxed(
    grid: Grid[Any],
    title: str | None = None,
    highlight: Iterable[Point2] = (),
    style: RenderStyle = DEFAULT_STYLE,
    colorize: Callable[[str], str] | None = None,
) -> str:
    """
    Render a grid inside a box, one centred character cell per element.

    Args:
        grid: The grid to render
        title: Optional title centred in the top border
        highlight: Positions to draw with a white background
        style: Cell width and border options
        colorize: Optional colorizer applied to non-highlighted text

    Returns:
        Rendered string, possibly containing ANSI color codes
    """
    if colorize is None:
        colorize = lambda s: s

    highlighted = set(highlight)
    cell_width = style.cell_width
    border_width = 2 if style.border else 0
    grid_width = grid.width * cell_width + border_width
    logger.debug(
        "render_grid_boxed: %dx%d grid, %d highlighted, %d chars wide",
        grid.width, grid.height, len(highlighted), grid_width,
    )

    lines: list[str] = []

    if style.border:
        title_line = "┌" + "─" * (grid_width - 2) + "┐"
        if title is not None:
            label = f" {title} "
            # Center title in the border
            if len(label) <= grid_width - 2:
                title_start = (grid_width - len(label)) // 2
                title_line = (
                    "┌" +
                    "─" * (title_start - 1) +
                    label +
                    "─" * (grid_width - title_start - len(label) - 1) +
                    "┐"
                )
        lines.append(colorize(title_line))

    for position_row in grid.position_grid().rows:
        line_parts = [colorize("│")] if style.border else []

        for position in position_row:
            element = str(grid.get_unchecked(position.x, position.y))
            char = element[0] if element else " "
            content = char if cell_width == 1 else char.center(cell_width)

            if position in highlighted:
                content = chalk.bgWhite.black(content)
            else:
                content = colorize(content)
            line_parts.append(content)

        if style.border:
            line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    if style.border:
        lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))

    return "\n".join(lines)
