"""Tests for grid_parser module."""

import pytest

from grid_parser import (
    parse_char_grid,
    parse_digit_grid,
    parse_directions,
    parse_positions,
    parse_token_grid,
    split_lines,
)
from grid_types import Direction, Point2
from gridkit import Grid


class TestSplitLines:
    """Tests for split_lines."""

    def test_drops_one_trailing_newline(self) -> None:
        """Only the final newline is removed."""
        assert split_lines("ab\ncd\n") == ["ab", "cd"]
        assert split_lines("ab\ncd\n\n") == ["ab", "cd", ""]

    def test_keeps_interior_blank_lines(self) -> None:
        """Blank lines inside the text survive."""
        assert split_lines("a\n\nb") == ["a", "", "b"]


class TestParseCharGrid:
    """Tests for the character grid parser."""

    def test_simple_grid(self) -> None:
        """One element per character, one row per line."""
        grid = parse_char_grid("#.\n.#\n")
        assert grid == Grid([["#", "."], [".", "#"]])
        assert grid.positions_of("#") == [Point2(0, 0), Point2(1, 1)]

    def test_ragged_lines(self) -> None:
        """Lines of differing length are rejected by the grid."""
        with pytest.raises(ValueError, match="Inconsistent row lengths"):
            parse_char_grid("###\n##\n###")


class TestParseDigitGrid:
    """Tests for the digit grid parser."""

    def test_digits(self) -> None:
        """Each character becomes an int."""
        grid = parse_digit_grid("123\n456")
        assert grid == Grid([[1, 2, 3], [4, 5, 6]])
        assert sum(grid) == 21

    def test_invalid_digit(self) -> None:
        """A non-digit reports its row and column."""
        with pytest.raises(ValueError, match="Invalid digit") as excinfo:
            parse_digit_grid("12\n3x")
        message = str(excinfo.value)
        assert "Row 1" in message
        assert "column 1" in message


class TestParseTokenGrid:
    """Tests for the token grid parser."""

    def test_whitespace_tokens(self) -> None:
        """Runs of whitespace separate tokens by default."""
        grid = parse_token_grid("10  2 3\n4 50 6", convert=int)
        assert grid == Grid([[10, 2, 3], [4, 50, 6]])

    def test_custom_separator(self) -> None:
        """An explicit separator splits exactly on it."""
        grid = parse_token_grid("a,b\nc,d", separator=",")
        assert grid.column(1)[1] == "d"

    def test_ragged_tokens(self) -> None:
        """Rows with differing token counts are rejected."""
        with pytest.raises(ValueError):
            parse_token_grid("1 2\n3")


class TestParsePositions:
    """Tests for the position list parser."""

    def test_positions(self) -> None:
        """One point per line, blank lines skipped."""
        assert parse_positions("0, 0\n2, 1\n\n-3, 4\n") == [
            Point2(0, 0), Point2(2, 1), Point2(-3, 4)
        ]

    def test_positions_feed_sparse_grid(self) -> None:
        """Parsed positions build a sparse grid."""
        grid = Grid.from_positions(parse_positions("0,0\n2,1"), present=1, absent=0)
        assert grid == Grid([[1, 0, 0], [0, 0, 1]])

    def test_invalid_position(self) -> None:
        """Malformed lines raise."""
        with pytest.raises(ValueError, match="Invalid point"):
            parse_positions("1, 2\nthree, 4")


class TestParseDirections:
    """Tests for the direction string parser."""

    def test_mixed_notations(self) -> None:
        """Arrows, compass and URDL letters can be mixed."""
        assert parse_directions("^>v<") == [
            Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT
        ]
        assert parse_directions("N e S w") == parse_directions("URDL")

    def test_unknown_character_raises(self) -> None:
        """An unrecognized character reports its position."""
        with pytest.raises(ValueError, match="Invalid direction character") as excinfo:
            parse_directions("UR?D")
        assert "Position: 2" in str(excinfo.value)

    def test_skip_unknown(self) -> None:
        """Unrecognized characters can be dropped instead."""
        assert parse_directions("U?R!", skip_unknown=True) == [Direction.UP, Direction.RIGHT]

    def test_walk_directions(self) -> None:
        """Summing offsets of a parsed path gives the displacement."""
        position = Point2.ZERO
        for direction in parse_directions(">>^<vv"):
            position = position + direction.offset
        assert position == Point2(1, 1)
