"""
Grid module for the Sweeper engine.

A fixed-size, row-major container of cell values addressed by (x, y).
Holds no game rules: bounds checking, neighbor enumeration and
per-cell read/write only.
"""
from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar


T = TypeVar("T")

Position = Tuple[int, int]


# ============================================================================
# Errors
# ============================================================================

class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) outside {width}x{height} grid"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


# ============================================================================
# Constants
# ============================================================================

# Row above, same row, row below; left to right within each row.
NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_x, delta_y)
    for delta_y in (-1, 0, 1)
    for delta_x in (-1, 0, 1)
    if (delta_x, delta_y) != (0, 0)
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid(Generic[T]):
    """
    Rectangular array of cells stored row-major.

    Attributes:
        width: Number of columns (x runs from 0 to width - 1).
        height: Number of rows (y runs from 0 to height - 1).
    """

    def __init__(self, width: int, height: int, fill: T) -> None:
        """
        Create a grid with every cell set to ``fill``.

        Args:
            width: Number of columns, at least 1.
            height: Number of rows, at least 1.
            fill: Initial value of every cell.

        Raises:
            ValueError: If a dimension is smaller than 1.
        """
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells: List[T] = [fill] * (width * height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """
        Build a grid from nested rows, ``rows[y][x]``.

        Raises:
            ValueError: If there are no rows or rows differ in length.
        """
        if not rows or not rows[0]:
            raise ValueError("Grid dimensions must be positive")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")

        grid = cls(width, len(rows), rows[0][0])
        grid._cells = [value for row in rows for value in row]
        return grid

    # ========================================================================
    # Bounds (Low-level)
    # ========================================================================

    def contains(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    # ========================================================================
    # Cell Access
    # ========================================================================

    def at(self, x: int, y: int) -> T:
        """
        Get the value stored at a position.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        """
        Overwrite the value stored at a position.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        self._cells[self._index(x, y)] = value

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            Up to 8 (x, y) tuples, always in the same order.
        """
        neighbors = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.contains(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    # ========================================================================
    # Iteration
    # ========================================================================

    def positions(self) -> Iterator[Position]:
        """Iterate over every (x, y) position in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def values(self) -> List[T]:
        """Get all cell values in row-major order."""
        return list(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
