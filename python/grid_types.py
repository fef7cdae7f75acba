"""
Shared type definitions for gridkit: coordinates, offsets and directions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, Flag
from functools import total_ordering
from typing import ClassVar, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


def wrapping_index(sequence: Sequence[T], index: int) -> T:
    """Index into a sequence, wrapping any integer into [0, len)."""
    if not sequence:
        raise ValueError("Cannot wrap an index into an empty sequence")
    # Python's % already yields a result in [0, count) for a positive count
    return sequence[index % len(sequence)]


def _divide_truncating(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


# =============================================================================
# Point2
# =============================================================================


@total_ordering
@dataclass(frozen=True)
class Point2:
    """
    Integer 2D vector, used both as a grid coordinate and as a displacement.

    Points order row-major: by y first, then by x.
    """

    x: int
    y: int

    ZERO: ClassVar[Point2]
    UNIT_X: ClassVar[Point2]
    UNIT_Y: ClassVar[Point2]

    def __add__(self, other: Point2) -> Point2:
        if not isinstance(other, Point2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2) -> Point2:
        if not isinstance(other, Point2):
            return NotImplemented
        return Point2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point2:
        return Point2(-self.x, -self.y)

    def __mul__(self, scale: int) -> Point2:
        if not isinstance(scale, int):
            return NotImplemented
        return Point2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: int) -> Point2:
        """Divide both components, truncating toward zero."""
        if not isinstance(scale, int):
            return NotImplemented
        if scale == 0:
            raise ZeroDivisionError("Point2 division by zero")
        return Point2(_divide_truncating(self.x, scale), _divide_truncating(self.y, scale))

    def __lt__(self, other: Point2) -> bool:
        if not isinstance(other, Point2):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @property
    def absolute(self) -> int:
        """Manhattan length."""
        return abs(self.x) + abs(self.y)

    @property
    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def distance(self, other: Point2) -> int:
        """Manhattan distance to another point."""
        return (self - other).absolute

    def with_(self, x: int | None = None, y: int | None = None) -> Point2:
        return Point2(self.x if x is None else x, self.y if y is None else y)

    def applying_offsets(self, offsets: Iterable[Point2]) -> list[Point2]:
        return [self + offset for offset in offsets]

    @property
    def neighbors(self) -> list[Point2]:
        """The 4 axis-aligned neighbors: up, right, down, left."""
        return self.applying_offsets(DISTANCE_1)

    @property
    def neighbors_with_diagonals(self) -> list[Point2]:
        """The 8 surrounding points, clockwise starting from up."""
        return self.applying_offsets(DISTANCE_1_OR_DIAGONAL)

    @classmethod
    def parse(cls, text: str) -> Point2:
        """
        Parse the "x, y" textual form, e.g. "3, -4".

        Raises:
            ValueError: If the text is not two comma-separated integers
        """
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid point: '{text}'\n  Expected two integers separated by ','")
        try:
            return cls(int(parts[0].strip()), int(parts[1].strip()))
        except ValueError:
            raise ValueError(
                f"Invalid point: '{text}'\n  Both components must be integers"
            ) from None


Point2.ZERO = Point2(0, 0)
Point2.UNIT_X = Point2(1, 0)
Point2.UNIT_Y = Point2(0, 1)

DISTANCE_1: tuple[Point2, ...] = (
    Point2(0, -1),
    Point2(+1, 0),
    Point2(0, +1),
    Point2(-1, 0),
)

DISTANCE_1_OR_DIAGONAL: tuple[Point2, ...] = (
    Point2(0, -1),
    Point2(+1, -1),
    Point2(+1, 0),
    Point2(+1, +1),
    Point2(0, +1),
    Point2(-1, +1),
    Point2(-1, 0),
    Point2(-1, -1),
)


# =============================================================================
# Directions
# =============================================================================


class CyclicEnum(Enum):
    """Enum whose members form a cycle in declaration order."""

    def rotated(self, by: int = 1):
        """Return the member `by` steps further along the cycle (negative steps go back)."""
        members = list(type(self))
        return wrapping_index(members, members.index(self) + by)


class Direction(CyclicEnum):
    """Axis-aligned direction, in clockwise order."""

    UP = "U"  # decreasing y
    RIGHT = "R"  # increasing x
    DOWN = "D"  # increasing y
    LEFT = "L"  # decreasing x

    @property
    def offset(self) -> Point2:
        return _OFFSETS[self]

    @property
    def clockwise(self) -> Direction:
        return self.rotated(1)

    @property
    def counterclockwise(self) -> Direction:
        return self.rotated(-1)

    @property
    def opposite(self) -> Direction:
        return self.rotated(2)

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def __str__(self) -> str:
        return self.glyph

    @classmethod
    def from_char(cls, char: str) -> Direction | None:
        """
        Look up a direction by character.

        Accepts arrows (↑→↓← or ^>v<), compass letters (NESW) and URDL letters,
        letters in either case. Returns None for anything else.
        """
        return _CHARS.get(char) or _CHARS.get(char.upper())


_OFFSETS: dict[Direction, Point2] = {
    Direction.UP: Point2(0, -1),
    Direction.RIGHT: Point2(+1, 0),
    Direction.DOWN: Point2(0, +1),
    Direction.LEFT: Point2(-1, 0),
}

_GLYPHS: dict[Direction, str] = {
    Direction.UP: "↑",
    Direction.RIGHT: "→",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
}

_CHARS: dict[str, Direction] = {
    # arrows
    "↑": Direction.UP, "→": Direction.RIGHT, "↓": Direction.DOWN, "←": Direction.LEFT,
    "^": Direction.UP, ">": Direction.RIGHT, "v": Direction.DOWN, "<": Direction.LEFT,
    # compass
    "N": Direction.UP, "E": Direction.RIGHT, "S": Direction.DOWN, "W": Direction.LEFT,
    # URDL
    "U": Direction.UP, "R": Direction.RIGHT, "D": Direction.DOWN, "L": Direction.LEFT,
}


class DirectionSet(Flag):
    """Compact set of directions, e.g. the exits reachable from a cell."""

    NONE = 0
    UP = 1 << 0
    RIGHT = 1 << 1
    DOWN = 1 << 2
    LEFT = 1 << 3
    ALL = UP | RIGHT | DOWN | LEFT

    @classmethod
    def of(cls, direction: Direction) -> DirectionSet:
        return cls[direction.name]

    @classmethod
    def from_directions(cls, directions: Iterable[Direction]) -> DirectionSet:
        result = cls.NONE
        for direction in directions:
            result |= cls.of(direction)
        return result

    def includes(self, direction: Direction) -> bool:
        return bool(self & DirectionSet.of(direction))

    def directions(self) -> list[Direction]:
        """Members of the set in clockwise order starting from up."""
        return [direction for direction in Direction if self.includes(direction)]
