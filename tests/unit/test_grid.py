"""
Unit tests for Grid class.

Tests bounds checking, cell access, neighbor enumeration and
row-major iteration.
"""
import pytest
from sweeper import Grid, OutOfBoundsError


# ============================================================================
# Grid Construction Tests
# ============================================================================

class TestGridConstruction:
    """Test grid creation."""

    def test_grid_filled_with_initial_value(self, small_grid: Grid) -> None:
        """Every cell should hold the fill value."""
        assert small_grid.values() == [0] * 9

    def test_grid_has_correct_dimensions(self) -> None:
        """Grid should report its dimensions."""
        grid = Grid(4, 2, None)
        assert grid.width == 4
        assert grid.height == 2
        assert len(grid) == 8

    @pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
    def test_non_positive_dimensions_raise_error(
        self, width: int, height: int
    ) -> None:
        """Dimensions below 1 should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            Grid(width, height, 0)

    def test_from_rows_is_row_major(self) -> None:
        """Nested rows should be indexed rows[y][x]."""
        grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
        assert grid.width == 3
        assert grid.height == 2
        assert grid.at(2, 0) == 3
        assert grid.at(0, 1) == 4
        assert grid.values() == [1, 2, 3, 4, 5, 6]

    def test_from_rows_rejects_ragged_rows(self) -> None:
        """Rows of different lengths should raise ValueError."""
        with pytest.raises(ValueError, match="same length"):
            Grid.from_rows([[1, 2], [3]])

    def test_from_rows_rejects_empty_input(self) -> None:
        """Empty input should raise ValueError."""
        with pytest.raises(ValueError):
            Grid.from_rows([])


# ============================================================================
# Cell Access Tests
# ============================================================================

class TestCellAccess:
    """Test reading and writing cells."""

    def test_set_then_at_returns_value(self, small_grid: Grid) -> None:
        """Written value should be read back."""
        small_grid.set(2, 1, 42)
        assert small_grid.at(2, 1) == 42

    def test_set_only_changes_target_cell(self, small_grid: Grid) -> None:
        """Writing a cell should leave the others untouched."""
        small_grid.set(1, 2, 5)
        assert small_grid.values() == [0, 0, 0, 0, 0, 0, 0, 5, 0]

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_at_out_of_bounds_raises(
        self, small_grid: Grid, x: int, y: int
    ) -> None:
        """Reading outside the grid should raise OutOfBoundsError."""
        with pytest.raises(OutOfBoundsError):
            small_grid.at(x, y)

    def test_set_out_of_bounds_raises(self, small_grid: Grid) -> None:
        """Writing outside the grid should raise and change nothing."""
        with pytest.raises(OutOfBoundsError):
            small_grid.set(3, 3, 1)
        assert small_grid.values() == [0] * 9

    def test_out_of_bounds_error_is_index_error(self, small_grid: Grid) -> None:
        """OutOfBoundsError should carry the coordinate."""
        with pytest.raises(IndexError) as excinfo:
            small_grid.at(5, -2)
        assert excinfo.value.x == 5
        assert excinfo.value.y == -2

    def test_contains(self, small_grid: Grid) -> None:
        """contains should be a pure bounds test."""
        assert small_grid.contains(0, 0) is True
        assert small_grid.contains(2, 2) is True
        assert small_grid.contains(3, 2) is False
        assert small_grid.contains(-1, 0) is False


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test neighbor enumeration."""

    @pytest.mark.parametrize("x, y, expected", [
        (0, 0, 3),
        (1, 0, 5),
        (1, 1, 8),
        (2, 2, 3),
    ])
    def test_neighbor_count(
        self, small_grid: Grid, x: int, y: int, expected: int
    ) -> None:
        """Corners, edges and center should have 3, 5 and 8 neighbors."""
        assert len(small_grid.neighbors(x, y)) == expected

    def test_neighbor_order_is_fixed(self, small_grid: Grid) -> None:
        """Neighbors should be listed row by row, left to right."""
        assert small_grid.neighbors(1, 1) == [
            (0, 0), (1, 0), (2, 0),
            (0, 1), (2, 1),
            (0, 2), (1, 2), (2, 2),
        ]

    def test_neighbors_exclude_center(self, small_grid: Grid) -> None:
        """A cell should not be its own neighbor."""
        assert (1, 1) not in small_grid.neighbors(1, 1)

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        """A 1x1 grid should have no neighbors."""
        assert Grid(1, 1, 0).neighbors(0, 0) == []


# ============================================================================
# Iteration Tests
# ============================================================================

class TestIteration:
    """Test row-major iteration."""

    def test_positions_are_row_major(self) -> None:
        """positions should walk each row left to right."""
        grid = Grid(2, 2, 0)
        assert list(grid.positions()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_values_returns_copy(self, small_grid: Grid) -> None:
        """Mutating values() should not change the grid."""
        values = small_grid.values()
        values[0] = 99
        assert small_grid.at(0, 0) == 0
