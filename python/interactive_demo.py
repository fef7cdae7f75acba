"""
Interactive demo for gridkit wraparound grids.
Move a marker with the keyboard; walking off an edge wraps to the other side.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid_boxed
from grid_parser import parse_char_grid
from gridkit import Direction, Grid, Point2

LAYOUTS = dict(
    garden="RRRRIICCFF|RRRRIICCCF|VVRRRCCFFF|VVRCCCJFFF|VVVVCJJCFE",
    rooms="#.#.#|.....|#.#.#|.....|#.#.#",
)

ARROW_KEYS = {
    readchar.key.UP: Direction.UP,
    readchar.key.RIGHT: Direction.RIGHT,
    readchar.key.DOWN: Direction.DOWN,
    readchar.key.LEFT: Direction.LEFT,
}


class InteractiveDemo:
    """Interactive walker over a wraparound grid."""

    def __init__(self, grid: Grid[str], title: str) -> None:
        self.grid = grid
        self.title = title
        self.position = Point2.ZERO
        self.heading = Direction.RIGHT
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        grid_text = render_grid_boxed(self.grid, title=self.title, highlight=[self.position])

        status = Text()
        status.append("Position: ", style="bold")
        status.append(f"{self.position}  heading {self.heading}\n")
        status.append("Current Cell: ", style="bold")
        status.append(f"{self.grid[self.position]}\n")
        status.append("Neighbors: ", style="bold")
        status.append(" ".join(self.grid.neighbors(self.position)) + "\n\n")

        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  Arrows, ^>v<, NESW or URDL - Step\n")
        status.append("  [ / ] - Turn counterclockwise / clockwise\n")
        status.append("  Space - Step forward\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="gridkit Interactive Demo", border_style="green", width=80)

    def step(self, direction: Direction) -> None:
        """Move one cell, wrapping around the edges."""
        self.heading = direction
        unwrapped = self.position + direction.offset
        self.position = self.grid.wrap(unwrapped)
        if unwrapped != self.position:
            self.status_message = f"{direction} wrapped to {self.position}"
        else:
            self.status_message = f"{direction} to {self.position}"

    def run(self) -> None:
        """Run the interactive demo until the user quits."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key in ARROW_KEYS:
                        self.step(ARROW_KEYS[key])
                    elif key == " ":
                        self.step(self.heading)
                    elif key == "[":
                        self.heading = self.heading.counterclockwise
                        self.status_message = f"Turned to {self.heading}"
                    elif key == "]":
                        self.heading = self.heading.clockwise
                        self.status_message = f"Turned to {self.heading}"
                    else:
                        direction = Direction.from_char(key)
                        if direction is not None:
                            self.step(direction)
                        else:
                            self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def main(layout: str) -> None:
    grid = parse_char_grid(LAYOUTS[layout].replace("|", "\n"))
    InteractiveDemo(grid, layout).run()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    main(sys.argv[1] if len(sys.argv) > 1 else "garden")
