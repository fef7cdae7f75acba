"""
Demonstration of gridkit grids, directions and rendering.
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import binary_image, render_grid_boxed
from grid_parser import parse_char_grid, parse_digit_grid, parse_positions
from gridkit import Direction, Grid, Point2

MAZE = """\
#########
#S..#...#
#.#.#.#.#
#.#...#E#
#########
"""

HEIGHTS = """\
30373
25512
65332
33549
35390
"""

SPARSE = """\
0, 0
2, 1
4, 3
1, 3
"""


def show(console: Console, title: str, body: str) -> None:
    console.print(Panel(Text.from_ansi(body), title=title, expand=False))


def demo() -> None:
    """Walk through the main grid operations."""
    console = Console()

    maze = parse_char_grid(MAZE)
    start = maze.positions_of("S")[0]
    show(console, "Maze", render_grid_boxed(maze, title="maze", highlight=[start]))
    show(console, "Indexed", str(maze))

    open_neighbors = [
        position for position, cell in maze.indexed_neighbors(start) if cell != "#"
    ]
    console.print(f"Open cells next to S at {start}: {', '.join(map(str, open_neighbors))}")

    heights = parse_digit_grid(HEIGHTS)
    show(console, "Heights", str(heights))
    show(console, "Transposed", str(heights.transposed()))
    console.print(f"Column 2 (live view): {list(heights.column(2))}")

    tallest = max(heights.positions(), key=lambda position: heights[position])
    console.print(f"Tallest tree at {tallest}: {heights[tallest]}")

    sparse = Grid.from_positions(parse_positions(SPARSE), present=True, absent=False)
    show(console, "Sparse", binary_image(sparse))

    # Walk off the edge of a torus
    position = Point2(0, 0)
    for direction in [Direction.UP, Direction.LEFT, Direction.LEFT.opposite]:
        position = heights.wrap(position + direction.offset)
        console.print(f"{direction} -> {position} = {heights[position]}")

    tiles = Grid.computing(2, 2, lambda p: heights.map(lambda h: h + p.x + p.y))
    show(console, "Flattened 2x2 tiling", str(tiles.flattened()))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    demo()
