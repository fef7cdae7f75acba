"""Tests for ascii_render module."""

import re

from ascii_render import (
    DEFAULT_STYLE,
    RenderStyle,
    binary_image,
    content_lines,
    describe,
    describe_chars,
    render_grid_boxed,
)
from gridkit import Grid, Point2

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class TestDescription:
    """Tests for the plain description convention."""

    def test_content_lines_right_align(self) -> None:
        """Every element is padded to the widest one."""
        grid = Grid([[1, 10], [100, 2]])
        assert content_lines(grid) == ["  1  10", "100   2"]

    def test_content_lines_uses_str(self) -> None:
        """Elements are rendered with str()."""
        grid = Grid([[Point2(1, 2), Point2(10, 0)]])
        assert content_lines(grid) == [" (1, 2) (10, 0)"]

    def test_describe(self) -> None:
        """The description indents each line inside Grid(...)."""
        assert describe(Grid([[1, 2], [3, 4]])) == "Grid(\n\t1 2\n\t3 4\n)"

    def test_describe_empty_rows(self) -> None:
        """Grids without columns still describe one line per row."""
        assert content_lines(Grid([[], []])) == ["", ""]

    def test_describe_chars(self) -> None:
        """Character grids get column and row indices."""
        grid = Grid([list("abc"), list("def")])
        assert describe_chars(grid) == "  0 1 2\n0 a b c\n1 d e f"

    def test_describe_chars_indices_repeat(self) -> None:
        """Indices count 0-9 and start over."""
        grid = Grid([list("abcdefghijkl")])
        header = describe_chars(grid).split("\n")[0]
        assert header == "  0 1 2 3 4 5 6 7 8 9 0 1"


class TestBinaryImage:
    """Tests for boolean rendering."""

    def test_binary_image(self) -> None:
        """Truthy cells are blocks, falsy cells are dots."""
        grid = Grid([[True, False], [False, True]])
        assert binary_image(grid) == "██··\n··██"

    def test_binary_image_custom_style(self) -> None:
        """Glyphs come from the style."""
        grid = Grid.from_positions([Point2(1, 0)], present=1, absent=0)
        assert binary_image(grid, RenderStyle(present="#", absent=".")) == ".#"


class TestBoxedRendering:
    """Tests for render_grid_boxed."""

    def test_box_single_width_cells(self) -> None:
        """Cells sit between box-drawing borders."""
        grid = Grid([list("ab"), list("cd")])
        rendered = render_grid_boxed(grid, style=RenderStyle(cell_width=1))
        assert strip_ansi(rendered) == "┌──┐\n│ab│\n│cd│\n└──┘"

    def test_box_with_title(self) -> None:
        """Titles are centred in the top border."""
        grid = Grid([list("ab")])
        rendered = strip_ansi(render_grid_boxed(grid, title="g"))
        assert rendered.split("\n") == [
            "┌─ g ──┐",
            "│ a  b │",
            "└──────┘",
        ]

    def test_title_too_long_is_omitted(self) -> None:
        """A title wider than the box is left out."""
        grid = Grid([list("ab")])
        rendered = strip_ansi(render_grid_boxed(grid, title="long title", style=RenderStyle(cell_width=1)))
        assert rendered.split("\n")[0] == "┌──┐"

    def test_no_border(self) -> None:
        """Without a border only the cells are drawn."""
        grid = Grid([list("ab"), list("cd")])
        rendered = render_grid_boxed(grid, style=RenderStyle(cell_width=1, border=False))
        assert strip_ansi(rendered) == "ab\ncd"

    def test_highlight_keeps_layout(self) -> None:
        """Highlighting changes colors only, never the visible text."""
        grid = Grid([list("ab"), list("cd")])
        plain = render_grid_boxed(grid)
        highlighted = render_grid_boxed(grid, highlight=[Point2(1, 1), Point2(0, 0)])
        assert strip_ansi(highlighted) == strip_ansi(plain)

    def test_multi_character_elements_use_first_char(self) -> None:
        """Each cell shows the first character of its element."""
        grid = Grid([[10, 2]])
        rendered = render_grid_boxed(grid, style=RenderStyle(cell_width=1, border=False))
        assert strip_ansi(rendered) == "12"

    def test_colorize(self) -> None:
        """A custom colorizer is applied to every non-highlighted piece."""
        grid = Grid([["x"]])
        rendered = render_grid_boxed(
            grid, style=RenderStyle(cell_width=1), colorize=lambda s: s.upper()
        )
        assert rendered == "┌─┐\n│X│\n└─┘"

    def test_default_style(self) -> None:
        """The default style uses 3-character cells with a border."""
        assert DEFAULT_STYLE == RenderStyle(cell_width=3, present="██", absent="··", border=True)
