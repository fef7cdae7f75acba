"""
Dense rectangular grids addressed by Point2.
Row-major storage, bounds-checked access, live column views, wraparound.
"""

from __future__ import annotations

import copy
import logging
from itertools import chain
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar, Union, overload

import ascii_render
from grid_types import (
    DISTANCE_1,
    DISTANCE_1_OR_DIAGONAL,
    CyclicEnum,
    Direction,
    DirectionSet,
    Point2,
    wrapping_index,
)

__all__ = [
    "ColumnView",
    "CyclicEnum",
    "DISTANCE_1",
    "DISTANCE_1_OR_DIAGONAL",
    "Direction",
    "DirectionSet",
    "Grid",
    "Point2",
    "wrapping_index",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

# A cell address: either a Point2 or an (x, y) tuple
Address = Union[Point2, tuple[int, int]]


def _as_point(address: Address) -> Point2:
    if isinstance(address, Point2):
        return address
    x, y = address
    return Point2(x, y)


class ColumnView(Sequence[T]):
    """
    Live, read-only view of one grid column.

    Elements are read from the owning grid on access, so mutations made to the
    grid after the view was created are visible through it.
    """

    def __init__(self, grid: Grid[T], x: int) -> None:
        self._grid = grid
        self.x = x

    def __len__(self) -> int:
        return self._grid.height

    @overload
    def __getitem__(self, y: int) -> T: ...

    @overload
    def __getitem__(self, y: slice) -> list[T]: ...

    def __getitem__(self, y: int | slice) -> T | list[T]:
        if isinstance(y, slice):
            return [self[i] for i in range(*y.indices(len(self)))]
        if not 0 <= y < len(self):
            raise IndexError(f"Column index {y} out of range for column of height {len(self)}")
        return self._grid.get_unchecked(self.x, y)

    def __repr__(self) -> str:
        return f"ColumnView(x={self.x}, {list(self)!r})"


class Grid(Generic[T]):
    """
    A dense 2D grid of elements, stored as `height` rows of `width` elements.

    Cells are addressed by Point2(x, y) (or an (x, y) tuple) with
    0 <= x < width and 0 <= y < height. Size is fixed at construction; only
    individual cells can be reassigned.
    """

    def __init__(self, rows: Iterable[Iterable[T]]) -> None:
        """
        Build a grid from rows of elements. The rows are copied.

        Raises:
            ValueError: If the rows do not all have the same length
        """
        copied = [list(row) for row in rows]
        width = len(copied[0]) if copied else 0

        mismatched = [(i, len(row)) for i, row in enumerate(copied) if len(row) != width]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {width} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
            error_msg += "  All rows must have the same number of elements"
            raise ValueError(error_msg)

        self.width = width
        self.height = len(copied)
        self._rows = copied

    @classmethod
    def _adopt(cls, rows: list[list[T]], width: int) -> Grid[T]:
        """Wrap freshly built storage without copying. Keeps `width` when there are no rows."""
        grid = cls.__new__(cls)
        grid.width = width
        grid.height = len(rows)
        grid._rows = rows
        return grid

    # =========================================================================
    # Alternative constructors
    # =========================================================================

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> Grid[T]:
        """Grid of the given size where every cell holds its own copy of `value`."""
        _check_dimensions(width, height)
        return cls._adopt(
            [[copy.deepcopy(value) for _ in range(width)] for _ in range(height)], width
        )

    @classmethod
    def computing(cls, width: int, height: int, element: Callable[[Point2], T]) -> Grid[T]:
        """Grid whose cells are `element(position)`, called once per cell in row-major order."""
        _check_dimensions(width, height)
        return cls._adopt(
            [[element(Point2(x, y)) for x in range(width)] for y in range(height)], width
        )

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[Point2],
        present: T = "█",  # type: ignore[assignment]
        absent: T = "·",  # type: ignore[assignment]
    ) -> Grid[T]:
        """
        Grid just large enough to hold every position, marking each as `present`.

        Size is (max x + 1) by (max y + 1); no positions gives a 1x1 grid.
        Duplicate positions are allowed and later ones overwrite earlier ones.

        Raises:
            IndexError: If a position has a negative coordinate
        """
        positions = list(positions)
        for position in positions:
            if position.x < 0 or position.y < 0:
                raise IndexError(
                    f"Position {position} has a negative coordinate\n"
                    f"  Sparse grids start at (0, 0)"
                )
        width = max((p.x for p in positions), default=0) + 1
        height = max((p.y for p in positions), default=0) + 1
        logger.debug(
            "from_positions: %d positions -> %dx%d grid", len(positions), width, height
        )

        grid = cls.filled(width, height, absent)
        for position in positions:
            grid[position] = copy.deepcopy(present)
        return grid

    # =========================================================================
    # Element access
    # =========================================================================

    def __getitem__(self, address: Address) -> T:
        position = _as_point(address)
        self._check_in_grid(position)
        return self._rows[position.y][position.x]

    def __setitem__(self, address: Address, value: T) -> None:
        position = _as_point(address)
        self._check_in_grid(position)
        self._rows[position.y][position.x] = value

    def get_unchecked(self, x: int, y: int) -> T:
        """Read a cell without bounds checking. The caller guarantees (x, y) is in the grid."""
        return self._rows[y][x]

    def is_in_grid(self, address: Address) -> bool:
        position = _as_point(address)
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def element_at(self, address: Address, default: T | None = None) -> T | None:
        """The element at `address`, or `default` if it lies outside the grid."""
        position = _as_point(address)
        if not self.is_in_grid(position):
            return default
        return self._rows[position.y][position.x]

    def indexed_element_at(self, address: Address) -> tuple[Point2, T] | None:
        position = _as_point(address)
        if not self.is_in_grid(position):
            return None
        return (position, self._rows[position.y][position.x])

    def wrap(self, address: Address) -> Point2:
        """
        Map any position onto the grid, treating both axes as wrapping around.

        Raises:
            ValueError: If the grid has zero width or height
        """
        position = _as_point(address)
        if self.width == 0 or self.height == 0:
            raise ValueError(
                f"Cannot wrap {position} into a {self.width}x{self.height} grid\n"
                f"  Wrapping requires a positive width and height"
            )
        return Point2(position.x % self.width, position.y % self.height)

    def element_wrapping(self, address: Address) -> T:
        wrapped = self.wrap(address)
        return self._rows[wrapped.y][wrapped.x]

    def _check_in_grid(self, position: Point2) -> None:
        if not self.is_in_grid(position):
            raise IndexError(
                f"Position {position} is outside the {self.width}x{self.height} grid"
            )

    # =========================================================================
    # Rows and columns
    # =========================================================================

    def row(self, y: int) -> list[T]:
        """A copy of row `y`."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for grid of height {self.height}")
        return list(self._rows[y])

    def column(self, x: int) -> ColumnView[T]:
        """A live view of column `x`."""
        if not 0 <= x < self.width:
            raise IndexError(f"Column {x} out of range for grid of width {self.width}")
        return ColumnView(self, x)

    @property
    def rows(self) -> list[list[T]]:
        return [list(row) for row in self._rows]

    @property
    def columns(self) -> list[ColumnView[T]]:
        return [ColumnView(self, x) for x in range(self.width)]

    def swap_rows(self, i: int, j: int) -> None:
        for y in (i, j):
            if not 0 <= y < self.height:
                raise IndexError(f"Row {y} out of range for grid of height {self.height}")
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]

    # =========================================================================
    # Traversal (row-major)
    # =========================================================================

    @property
    def start_position(self) -> Point2:
        return Point2.ZERO

    @property
    def end_position(self) -> Point2:
        """One past the last position: the start of the row below the grid."""
        return Point2(0, self.height)

    def successor(self, position: Point2) -> Point2:
        """The position after `position` in row-major order."""
        if position.x + 1 < self.width:
            return Point2(position.x + 1, position.y)
        return Point2(0, position.y + 1)

    def predecessor(self, position: Point2) -> Point2:
        """The position before `position` in row-major order."""
        if position.x - 1 >= 0:
            return Point2(position.x - 1, position.y)
        return Point2(self.width - 1, position.y - 1)

    def positions(self) -> Iterator[Point2]:
        if self.width == 0:
            return
        position = self.start_position
        end = self.end_position
        while position != end:
            yield position
            position = self.successor(position)

    def elements(self) -> Iterator[T]:
        return chain.from_iterable(self._rows)

    def indexed(self) -> Iterator[tuple[Point2, T]]:
        return zip(self.positions(), self.elements())

    def __iter__(self) -> Iterator[T]:
        return self.elements()

    def __len__(self) -> int:
        return self.width * self.height

    def positions_where(self, should_include: Callable[[T], bool]) -> list[Point2]:
        return [position for position, element in self.indexed() if should_include(element)]

    def positions_of(self, value: T) -> list[Point2]:
        return self.positions_where(lambda element: element == value)

    def position_grid(self) -> Grid[Point2]:
        """A grid of the same shape whose cells hold their own positions."""
        return Grid.computing(self.width, self.height, lambda position: position)

    # =========================================================================
    # Neighbors
    # =========================================================================

    def neighbors(self, address: Address) -> Iterator[T]:
        """Elements of the in-grid axis neighbors, in order up, right, down, left."""
        position = _as_point(address)
        for offset in DISTANCE_1:
            neighbor = self.element_at(position + offset, _MISSING)
            if neighbor is not _MISSING:
                yield neighbor

    def neighbors_with_diagonals(self, address: Address) -> Iterator[T]:
        """Elements of the in-grid surrounding cells, clockwise from up."""
        position = _as_point(address)
        for offset in DISTANCE_1_OR_DIAGONAL:
            neighbor = self.element_at(position + offset, _MISSING)
            if neighbor is not _MISSING:
                yield neighbor

    def indexed_neighbors(
        self, address: Address, diagonals: bool = False
    ) -> Iterator[tuple[Point2, T]]:
        position = _as_point(address)
        offsets = DISTANCE_1_OR_DIAGONAL if diagonals else DISTANCE_1
        for offset in offsets:
            found = self.indexed_element_at(position + offset)
            if found is not None:
                yield found

    # =========================================================================
    # Transforms
    # =========================================================================

    def map(self, transform: Callable[[T], U]) -> Grid[U]:
        """Apply `transform` to every element in row-major order."""
        return Grid._adopt(
            [[transform(element) for element in row] for row in self._rows], self.width
        )

    def transposed(self) -> Grid[T]:
        """Swap the axes: result[x, y] == self[y, x]."""
        new_rows: list[list[T]] = [[None] * self.height for _ in range(self.width)]  # type: ignore
        for position, element in self.indexed():
            new_rows[position.x][position.y] = element
        return Grid._adopt(new_rows, self.height)

    def flattened(self: Grid[Grid[U]]) -> Grid[U]:
        """
        Tile a grid of grids into one grid, placing each inner grid at its outer position.

        Raises:
            ValueError: If the inner grids do not all have the same size
        """
        inner_sizes = {(inner.width, inner.height) for inner in self.elements()}
        if len(inner_sizes) > 1:
            error_msg = "Cannot flatten grids of differing sizes\n  Inner grid sizes:\n"
            for position, inner in self.indexed():
                error_msg += f"    {position}: {inner.width}x{inner.height}\n"
            raise ValueError(error_msg.rstrip("\n"))

        inner_width, inner_height = inner_sizes.pop() if inner_sizes else (0, 0)
        logger.debug(
            "flattened: %dx%d grid of %dx%d grids",
            self.width, self.height, inner_width, inner_height,
        )

        rows: list[list[U]] = []
        for outer_row in self._rows:
            for inner_y in range(inner_height):
                rows.append(
                    [element for inner in outer_row for element in inner._rows[inner_y]]
                )
        return Grid._adopt(rows, self.width * inner_width)

    def copy(self) -> Grid[T]:
        return Grid._adopt([list(row) for row in self._rows], self.width)

    # =========================================================================
    # Equality and text
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._rows!r})"

    def __str__(self) -> str:
        if len(self) > 0 and all(
            isinstance(element, str) and len(element) == 1 for element in self.elements()
        ):
            return ascii_render.describe_chars(self)
        return ascii_render.describe(self)


_MISSING = object()


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(
            f"Invalid grid size {width}x{height}\n  Width and height must not be negative"
        )
